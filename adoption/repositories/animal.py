import logging
from typing import Optional, Protocol, runtime_checkable
from fastapi.concurrency import run_in_threadpool
from peewee import PeeweeException, prefetch
from pydantic import ValidationError
from adoption.database.fields import AnimalType, Gender
from adoption.database.models import Animal, AnimalImage
from adoption.models import AnimalImageData, AnimalWithImages


class RepositoryError(Exception):
    pass


@runtime_checkable
class AnimalLookup(Protocol):

    async def find_all_available_not_from_user(
        self,
        user_id: str,
        gender: Optional[str] = None,
        type: Optional[str] = None,
        name: Optional[str] = None,
    ) -> list[AnimalWithImages]:
        ...

    async def find_all_by_user_id(self, user_id: str) -> list[AnimalWithImages]:
        ...


def to_record(animal: Animal) -> AnimalWithImages:
    return AnimalWithImages(
        **animal.to_dict(),
        images=[
            AnimalImageData(
                id=image.id,
                animal_id=image.animal_id,
                image_data=bytes(image.image_data)
            )
            for image in animal.images
        ]
    )


class AnimalRepository:
    """Animal lookups backed by the peewee models.

    Queries run synchronously inside the thread pool so callers can await
    them from an event loop.
    """

    async def find_all_available_not_from_user(
        self,
        user_id: str,
        gender: Optional[str] = None,
        type: Optional[str] = None,
        name: Optional[str] = None,
    ) -> list[AnimalWithImages]:
        return await run_in_threadpool(
            self.available_not_from_user,
            user_id=user_id,
            gender=gender,
            type=type,
            name=name
        )

    async def find_all_by_user_id(self, user_id: str) -> list[AnimalWithImages]:
        return await run_in_threadpool(self.by_user_id, user_id=user_id)

    def available_not_from_user(
        self,
        user_id: str,
        gender: Optional[str] = None,
        type: Optional[str] = None,
        name: Optional[str] = None,
    ) -> list[AnimalWithImages]:
        filters = [
            Animal.adopted == False,  # noqa: E712
            Animal.user_id != user_id,
        ]
        if gender:
            f_gender = Gender.parse(gender)
            if not f_gender:
                logging.debug(f"unknown gender filter {gender}")
                return []
            filters.append(Animal.gender == f_gender)
        if type:
            f_type = AnimalType.parse(type)
            if not f_type:
                logging.debug(f"unknown type filter {type}")
                return []
            filters.append(Animal.type == f_type)
        if name:
            filters.append(Animal.name.contains(name))
        return self.fetch_with_images(Animal.select().where(*filters))

    def by_user_id(self, user_id: str) -> list[AnimalWithImages]:
        return self.fetch_with_images(
            Animal.select().where(Animal.user_id == user_id)
        )

    def fetch_with_images(self, query) -> list[AnimalWithImages]:
        query = query.order_by(Animal.created_at.desc(), Animal.id)
        try:
            with Animal._meta.database.connection_context():
                animals = prefetch(
                    query,
                    AnimalImage.select().order_by(AnimalImage.id)
                )
                return [to_record(animal) for animal in animals]
        except (PeeweeException, ValueError, ValidationError) as e:
            raise RepositoryError(f"animal lookup failed: {e}") from e


animal_repository_instance = AnimalRepository()
