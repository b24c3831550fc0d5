"""
Tests for extractor.competitor_detector module.

Tests cover:
- Mentions summed across keyword variants
- First occurrence over all variants
- Explicit rank from the canonical name, with keyword fallback
- Unmentioned competitors skipped
- Results registered in configuration order
"""

from brand_signals.config.schema import CompetitorConfig
from brand_signals.extractor.competitor_detector import detect_known_competitors
from brand_signals.extractor.consolidator import CompetitorRegistry


def detect(text, *competitors):
    registry = CompetitorRegistry()
    detected = detect_known_competitors(text, list(competitors), registry)
    return detected, registry


XIAOMI = CompetitorConfig(
    name="Xiaomi", keywords=["Xiaomi", "小米"], category="Wearables"
)
HUAWEI = CompetitorConfig(name="Huawei", keywords=["Huawei", "华为"])


class TestMentions:
    """Test mention counting and first occurrence."""

    def test_sums_keyword_variants(self):
        detected, _ = detect("小米 and XIAOMI and 小米手环", XIAOMI)

        assert detected[0].mentions == 3
        assert detected[0].category == "Wearables"
        assert detected[0].is_heuristic is False

    def test_first_index_is_minimum_over_keywords(self):
        detected, _ = detect("先说小米，然后是 Xiaomi", XIAOMI)
        assert detected[0].ranking.first_index == 2

    def test_unmentioned_competitor_skipped(self):
        detected, registry = detect("only Xiaomi here", XIAOMI, HUAWEI)

        assert [c.name for c in detected] == ["Xiaomi"]
        assert "Huawei" not in registry

    def test_default_category(self):
        detected, _ = detect("华为", HUAWEI)
        assert detected[0].category == "Uncategorized"

    def test_empty_keywords_never_match(self):
        ghost = CompetitorConfig(name="Ghost", keywords=[])
        detected, _ = detect("Ghost is everywhere", ghost)
        assert detected == []


class TestRanking:
    """Test explicit rank lookup."""

    def test_canonical_name_rank(self):
        detected, _ = detect("1. Huawei Watch\n2. Xiaomi Band", XIAOMI, HUAWEI)

        assert detected[0].name == "Xiaomi"
        assert detected[0].ranking.best_rank == 2
        assert detected[1].ranking.best_rank == 1

    def test_keyword_fallback(self):
        detected, _ = detect("推荐:\n1. 华为\n2. 小米\n3. 小米手环", XIAOMI)

        ranking = detected[0].ranking
        assert ranking.positions == [2, 3]
        assert ranking.best_rank == 2
        assert [line.content for line in ranking.raw_lines] == ["小米", "小米手环"]

    def test_canonical_name_wins_over_keywords(self):
        detected, _ = detect("1. 小米\n5. Xiaomi", XIAOMI)
        assert detected[0].ranking.positions == [5]

    def test_mentioned_but_unranked(self):
        detected, _ = detect("Xiaomi is popular", XIAOMI)

        assert detected[0].ranking.best_rank is None
        assert detected[0].ranking.is_implicit is False


class TestRegistration:
    """Test results are registered in configuration order."""

    def test_registry_order(self):
        _, registry = detect("华为 小米", XIAOMI, HUAWEI)
        assert [r.name for r in registry] == ["Xiaomi", "Huawei"]
