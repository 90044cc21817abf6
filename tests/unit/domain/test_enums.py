from etherscan_api.domain.enums import (
    CHAIN_IDS,
    BlockTag,
    BlockType,
    Chain,
    ClosestOption,
    NodeClientType,
    NodeSyncMode,
    Operator,
    Sort,
)


class TestEnumsAreStringMixin:
    """All enums use (str, Enum) so they drop straight into query strings."""

    def test_block_tag_is_str(self):
        assert isinstance(BlockTag.LATEST, str)
        assert BlockTag.LATEST == "latest"

    def test_query_enums(self):
        assert Sort.DESC == "desc"
        assert Operator.OR == "or"
        assert ClosestOption.AFTER == "after"
        assert BlockType.UNCLES == "uncles"

    def test_stats_enums(self):
        assert NodeClientType.PARITY == "parity"
        assert NodeSyncMode.ARCHIVE == "archive"


class TestChainIds:
    def test_every_chain_has_an_id(self):
        assert set(CHAIN_IDS) == set(Chain)

    def test_known_ids(self):
        assert CHAIN_IDS[Chain.ETHEREUM] == 1
        assert CHAIN_IDS[Chain.BASE] == 8453
        assert CHAIN_IDS[Chain.ARBITRUM] == 42161

    def test_lookup_by_value(self):
        assert CHAIN_IDS[Chain("optimism")] == 10
