import json
import pytest
from click.testing import CliRunner
from adoption import cli as cli_module
from adoption.cli import cli
from adoption.core.result import Failure
from adoption.database.models import Animal, AnimalImage


@pytest.fixture
def runner():
    return CliRunner()


def test_init_db_creates_tables(runner, db):
    db.drop_tables([Animal, AnimalImage])

    result = runner.invoke(cli, ["init-db"])

    assert result.exit_code == 0
    assert db.table_exists("animal")
    assert db.table_exists("animal_image")


def test_seed_then_list(runner, db):
    result = runner.invoke(cli, ["seed", "-u", "u1", "-n", "3", "-i", "2"])
    assert result.exit_code == 0, result.output
    assert Animal.select().where(Animal.user_id == "u1").count() == 3

    result = runner.invoke(cli, ["mine", "-u", "u1", "--json"])
    assert result.exit_code == 0, result.output
    payload = json.loads(result.output)
    assert len(payload["animals"]) == 3
    assert all(isinstance(x["images"], list) for x in payload["animals"])

    result = runner.invoke(cli, ["available", "-u", "u1", "--json"])
    assert json.loads(result.output) == {"animals": []}


def test_available_table(runner, create_animal):
    create_animal(user_id="u2", name="Rex", images=[b"png"])

    result = runner.invoke(cli, ["available", "-u", "u1", "-t", "dog"])

    assert result.exit_code == 0, result.output
    assert "Rex" in result.output
    assert "images" in result.output


def test_failure_exits_non_zero(runner, monkeypatch):
    class BrokenService:
        async def execute(self, params):
            return Failure.create("lookup failed")

    monkeypatch.setattr(
        cli_module, "get_user_animals_service_instance", BrokenService()
    )

    result = runner.invoke(cli, ["mine", "-u", "u1"])

    assert result.exit_code == 1
