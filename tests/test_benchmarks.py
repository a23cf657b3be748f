"""Smoke tests keeping the micro-benchmark script runnable."""

import math

from benchmark_pathtracer import run_all


class TestBenchmarks:
    """Every benchmark group runs and reports a time per call."""

    def test_all_groups_report(self):
        results = run_all(iterations=3, bvh_sizes=(10, 50))
        expected = {
            "hit_by/sphere", "hit_by/plane", "hit_by_list/fast",
            "hit_by_bvh/hit_by_list/10", "hit_by_bvh/hit_by_bvh/10",
            "hit_by_bvh/hit_by_list/50", "hit_by_bvh/hit_by_bvh/50",
            "scatter/lambertian", "scatter/metal", "scatter/dielectric", "scatter/black_body",
            "ray_color",
        }
        assert set(results) == expected
        for seconds in results.values():
            assert seconds >= 0.0 and math.isfinite(seconds)
