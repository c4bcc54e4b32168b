"""Planet 저장 → 검색 데모.

    python scripts/planet_demo.py
"""

import logging

from esstore import ESConfig, QueryDoc, QueryItem, QueryType, create_es_client
from esstore.repository import Planet, PlanetRepository

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def main() -> None:
    es = create_es_client(ESConfig())
    logger.info("cluster info: %s", es.info())

    repo = PlanetRepository.from_client(es)
    repo.save(
        Planet(planet_id="999", name="Earth", stage="beta", status="active"),
        refresh=True,
    )

    planets = repo.search(
        QueryDoc(and_=[QueryItem("planet_id", "999", QueryType.MATCH)])
    )
    for p in planets:
        print(p.model_dump(by_alias=True))


if __name__ == "__main__":
    main()
