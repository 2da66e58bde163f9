import pytest

from app.taming.service import arrows_for_level, build_rows, seed_tame_calculator


@pytest.fixture
async def seeded(patched_db):
    await seed_tame_calculator()
    return patched_db


async def test_seed_builds_full_table(seeded):
    rows = seeded.collections["tame_calculator"]
    assert len(rows) == 4 * 141
    assert rows[0] == {"dino": "Raptor", "level": 10, "arrows": 11}


async def test_seed_replaces_existing_rows(seeded):
    await seed_tame_calculator()
    assert len(seeded.collections["tame_calculator"]) == len(build_rows())


async def test_arrows_lookup(client, seeded):
    response = await client.post("/api/taming/arrows", json={"dino": "Rex", "level": 150})
    assert response.status_code == 200
    assert response.json() == {"arrows": 165}


async def test_arrows_rounds_up(client, seeded):
    response = await client.post("/api/taming/arrows", json={"dino": "Trike", "level": 11})
    assert response.json() == {"arrows": 13}


async def test_arrows_not_found(client, seeded):
    response = await client.post("/api/taming/arrows", json={"dino": "Rex", "level": 151})
    assert response.status_code == 404


@pytest.mark.parametrize(
    "body",
    [{"level": 20}, {"dino": "Rex"}, {"dino": "Rex", "level": "20"}, {"dino": "Rex", "level": True}],
)
async def test_arrows_bad_input(client, body):
    response = await client.post("/api/taming/arrows", json=body)
    assert response.status_code == 400


@pytest.mark.parametrize("level, arrows", [(10, 11), (11, 13), (100, 110), (150, 165)])
def test_arrows_for_level(level, arrows):
    assert arrows_for_level(level) == arrows
