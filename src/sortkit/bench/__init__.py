"""
Benchmark harness for the sorts. Developer tooling, not library API.

    python -m sortkit.bench.runner experiments/configs/01_elementary_scaling.yaml
"""
