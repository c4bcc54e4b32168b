import pytest
from elasticsearch import ConflictError

from conftest import head_response, hits, make_api_error
from esstore import DocumentConflictError, DocumentStore, QueryDoc
from esstore.repository import Planet, PlanetRepository, planet_index_mapping

EARTH = Planet(planet_id="999", name="Earth", stage="beta", status="active")
EARTH_SOURCE = {"planet_id": "999", "planet_name": "Earth", "stage": "beta", "status": "active"}


@pytest.fixture
def repo(es):
    return PlanetRepository(DocumentStore(es, "planet"))


def test_from_client_index_name(es):
    repo = PlanetRepository.from_client(es, "planet_v2")
    assert repo.index_name == "planet_v2"
    assert repo.store.es is es


def test_add_and_refresh(es, repo):
    repo.add_and_refresh(EARTH)
    es.create.assert_called_once_with(index="planet", id="999", document=EARTH_SOURCE, refresh="wait_for")


def test_add_existing(es, repo):
    es.create.side_effect = make_api_error(
        409, {"error": {"type": "version_conflict_engine_exception", "reason": "exists"}}, cls=ConflictError
    )
    with pytest.raises(DocumentConflictError):
        repo.add(EARTH)


def test_save_is_upsert(es, repo):
    repo.save(Planet(planet_id="999", status="inactive"))
    kwargs = es.update.call_args.kwargs
    assert kwargs["doc"] == {"planet_id": "999", "status": "inactive"}
    assert kwargs["doc_as_upsert"] is True


def test_update_is_not_upsert(es, repo):
    repo.update(EARTH)
    assert "doc_as_upsert" not in es.update.call_args.kwargs


def test_get(es, repo):
    es.get.return_value = {"_source": EARTH_SOURCE}
    assert repo.get("999") == EARTH


def test_exists_and_remove(es, repo):
    es.exists.return_value = head_response(200)
    assert repo.exists("999") is True
    assert repo.remove("999") is True
    es.delete.assert_called_once_with(index="planet", id="999", refresh=False)


def test_find_by_id_field(es, repo):
    es.search.return_value = hits(EARTH_SOURCE)
    assert repo.find_by_id_field("999") == [EARTH]
    assert es.search.call_args.kwargs["body"] == {
        "query": {"bool": {"must": [{"match": {"planet_id": "999"}}]}}
    }


def test_find_by_name(es, repo):
    es.search.return_value = hits()
    assert repo.find_by_name("Nowhere") == []
    assert es.search.call_args.kwargs["body"]["query"]["bool"]["must"] == [
        {"match": {"planet_name": "Nowhere"}}
    ]


def test_find_by_status(es, repo):
    es.search.return_value = hits(EARTH_SOURCE)
    repo.find_by_status("active", size=5)
    assert es.search.call_args.kwargs["body"] == {
        "query": {"bool": {"filter": [{"term": {"status": "active"}}]}},
        "size": 5,
    }


def test_search_passes_query_through(es, repo):
    es.search.return_value = hits(EARTH_SOURCE)
    assert repo.search(QueryDoc()) == [EARTH]
    assert es.search.call_args.kwargs["index"] == "planet"


def test_index_management(es, repo):
    repo.create_index({"settings": {"number_of_shards": 1}})
    repo.drop_index()
    es.indices.create.assert_called_once_with(index="planet", body={"settings": {"number_of_shards": 1}})
    es.indices.delete.assert_called_once_with(index="planet")


def test_from_client_default_index(es):
    assert PlanetRepository.from_client(es).index_name == "planet"


def test_create_index_uses_planet_mapping_by_default(es, repo):
    repo.create_index()
    es.indices.create.assert_called_once_with(index="planet", body=planet_index_mapping())
    assert es.indices.create.call_args.kwargs["body"]["mappings"]["properties"]["planet_id"] == {"type": "keyword"}


def test_timeout_is_forwarded(es, repo):
    es.get.return_value = {"_source": EARTH_SOURCE}
    repo.get("999", timeout=2.0)
    es.options.assert_called_once_with(request_timeout=2.0)


def test_search_helpers_forward_timeout(es, repo):
    es.search.return_value = hits()
    repo.find_by_status("active", timeout=0.5)
    es.options.assert_called_once_with(request_timeout=0.5)


def test_no_timeout_by_default(es, repo):
    repo.save(EARTH)
    es.options.assert_not_called()
