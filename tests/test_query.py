import pytest

from esstore.query import QueryDoc, QueryItem, QueryType


def test_empty_query_is_match_all():
    assert QueryDoc().to_dsl() == {"query": {"match_all": {}}}


def test_single_match():
    q = QueryDoc(and_=[QueryItem("doc_id", "111", QueryType.MATCH)])
    assert q.to_dsl() == {"query": {"bool": {"must": [{"match": {"doc_id": "111"}}]}}}


def test_default_type_is_match():
    assert QueryItem("name", "Earth").to_dsl() == {"match": {"name": "Earth"}}


def test_all_clauses_and_paging():
    q = QueryDoc(
        size=10,
        from_=20,
        sort=[{"create_at": "desc"}],
        search_after=["2024-01-01"],
        and_=[QueryItem("stage", "beta", QueryType.TERM)],
        or_=[QueryItem("planet_name", "Ear", QueryType.PREFIX)],
        not_=[QueryItem("status", "banned", QueryType.TERM)],
        filter=[QueryItem("create_at", {"gte": "now-1d"}, QueryType.RANGE)],
    )
    assert q.to_dsl() == {
        "query": {
            "bool": {
                "must": [{"term": {"stage": "beta"}}],
                "should": [{"prefix": {"planet_name": "Ear"}}],
                "must_not": [{"term": {"status": "banned"}}],
                "filter": [{"range": {"create_at": {"gte": "now-1d"}}}],
            }
        },
        "size": 10,
        "from": 20,
        "sort": [{"create_at": "desc"}],
        "search_after": ["2024-01-01"],
    }


@pytest.mark.parametrize(
    "item, expected",
    [
        (QueryItem("ban_info", type=QueryType.EXISTS), {"exists": {"field": "ban_info"}}),
        (QueryItem("status", ["a", "b"], QueryType.TERMS), {"terms": {"status": ["a", "b"]}}),
        (QueryItem("status", "a", QueryType.TERMS), {"terms": {"status": ["a"]}}),
        (QueryItem("planet_name", "Ea*", QueryType.WILDCARD), {"wildcard": {"planet_name": "Ea*"}}),
        (QueryItem("planet_name", "big planet", QueryType.MATCH_PHRASE), {"match_phrase": {"planet_name": "big planet"}}),
        (
            QueryItem("planet_name", "Earth OR Mars", QueryType.QUERY_STRING),
            {"query_string": {"query": "Earth OR Mars", "default_field": "planet_name"}},
        ),
    ],
)
def test_item_types(item, expected):
    assert item.to_dsl() == expected


def test_range_requires_dict():
    with pytest.raises(ValueError):
        QueryItem("age", 3, QueryType.RANGE).to_dsl()


def test_index_is_not_part_of_body():
    assert "index" not in QueryDoc(index="planet").to_dsl()
