from ingraind_acceptance.verification.data_models.check_result import CheckResult
from ingraind_acceptance.verification.set_comparator import RecordSetComparator


def _compare(actual, expected) -> CheckResult:
    return RecordSetComparator().compare(actual, expected)


class TestEquality:
    """Equal multisets pass regardless of order."""

    def test_identical_sets_pass(self, invariant_descriptors):
        result = _compare(invariant_descriptors, invariant_descriptors)
        assert result.passed is True
        assert result.missing == ()
        assert result.unexpected == ()

    def test_empty_sets_pass(self):
        assert _compare((), ()).passed is True

    def test_order_insensitive(self):
        result = _compare(["b, Kprobe", "a, XDP"], ["a, XDP", "b, Kprobe"])
        assert result.passed is True
        assert result.actual == ("a, XDP", "b, Kprobe")
        assert result.expected == ("a, XDP", "b, Kprobe")


class TestDifferences:
    """missing and unexpected are count-exact multiset differences."""

    def test_missing_entry(self):
        result = _compare(["a, XDP"], ["a, XDP", "b, Kprobe"])
        assert result.passed is False
        assert result.missing == ("b, Kprobe",)
        assert result.unexpected == ()

    def test_unexpected_entry(self):
        result = _compare(["a, XDP", "c, Kprobe"], ["a, XDP"])
        assert result.passed is False
        assert result.missing == ()
        assert result.unexpected == ("c, Kprobe",)

    def test_duplicate_counts_matter(self):
        result = _compare(["a, XDP", "a, XDP"], ["a, XDP"])
        assert result.passed is False
        assert result.unexpected == ("a, XDP",)

    def test_missing_duplicate(self):
        result = _compare(["a, XDP"], ["a, XDP", "a, XDP"])
        assert result.missing == ("a, XDP",)

    def test_case_sensitive(self):
        result = _compare(["a, kprobe"], ["a, Kprobe"])
        assert result.missing == ("a, Kprobe",)
        assert result.unexpected == ("a, kprobe",)

    def test_formatting_strict(self):
        result = _compare(["a,Kprobe"], ["a, Kprobe"])
        assert result.passed is False

    def test_empty_actual_lists_everything_missing(self, invariant_descriptors):
        result = _compare((), invariant_descriptors)
        assert result.passed is False
        assert result.missing == tuple(sorted(invariant_descriptors))
