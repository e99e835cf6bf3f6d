"""
Tests for the top-level pynumerics namespace.
"""

import pynumerics


class TestNamespace:

    def test_all_exports_resolve(self):
        for name in pynumerics.__all__:
            assert hasattr(pynumerics, name), name

    def test_routines_exposed(self):
        for name in (
            "mean", "variance", "variance_with_mean", "std_dev",
            "std_dev_with_mean", "median", "skewness", "kurtosis",
            "linear_regression", "calculate_error",
            "trim", "split", "starts_with", "ends_with",
        ):
            assert callable(getattr(pynumerics, name))

    def test_end_to_end(self):
        data = [2.0, 4.0, 4.0, 4.0, 5.0, 5.0, 7.0, 9.0]
        m = pynumerics.mean(data)
        s = pynumerics.std_dev_with_mean(data, m)
        assert m == 5.0
        assert pynumerics.skewness(data, m, s) > 0.0

        fields = pynumerics.split(pynumerics.trim(" 1,2,3 \n"), ",")
        x = [float(f) for f in fields]
        fit = pynumerics.linear_regression(x, [2.0, 4.0, 6.0])
        errors = pynumerics.calculate_error([2.0, 4.0, 6.0], fit.predict(x))
        assert errors.rmse < 1e-9
