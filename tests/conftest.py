import os
import tempfile
from pathlib import Path
import datetime
import pytest

DB_PATH = Path(tempfile.mkdtemp()) / "adoption-test.db"

os.environ["DB__URL"] = f"sqlite:///{DB_PATH.as_posix()}"
os.environ["LOG__LEVEL"] = "DEBUG"

from adoption.database.database import Database  # noqa: E402
from adoption.database.models import Animal, AnimalImage  # noqa: E402
from adoption.models import AnimalImageData, AnimalWithImages  # noqa: E402

BASE_TIME = datetime.datetime(2024, 1, 1, 12, 0, 0)


@pytest.fixture
def db():
    database = Database.db
    database.create_tables([Animal, AnimalImage])
    yield database
    database.drop_tables([Animal, AnimalImage])
    database.close()


@pytest.fixture
def create_animal(db):
    counter = {"n": 0}

    def factory(user_id="owner", images=(), **fields):
        counter["n"] += 1
        fields.setdefault("name", f"animal-{counter['n']}")
        fields.setdefault("type", "dog")
        fields.setdefault("gender", "male")
        fields.setdefault(
            "created_at", BASE_TIME - datetime.timedelta(minutes=counter["n"])
        )
        animal = Animal.create(user_id=user_id, **fields)
        for data in images:
            AnimalImage.create(animal=animal, image_data=data)
        return animal

    return factory


def make_animal(animal_id: str, user_id: str = "u1", images=(), **fields):
    fields.setdefault("name", f"name-{animal_id}")
    fields.setdefault("type", "dog")
    fields.setdefault("gender", "female")
    return AnimalWithImages(
        id=animal_id,
        user_id=user_id,
        created_at=BASE_TIME,
        images=[
            AnimalImageData(id=idx + 1, animal_id=animal_id, image_data=data)
            for idx, data in enumerate(images)
        ],
        **fields
    )


@pytest.fixture
def animal_builder():
    return make_animal
