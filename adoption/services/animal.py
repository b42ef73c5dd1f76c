import logging
from typing import Optional, Union
from pydantic import BaseModel
from adoption.core.formatter import AnimalFormatError, AnimalFormatter
from adoption.core.result import Failure, Success
from adoption.models import FormattedAnimal
from adoption.repositories.animal import (
    AnimalLookup,
    RepositoryError,
    animal_repository_instance,
)


class GetAvailableAnimalsParams(BaseModel):
    user_id: str
    gender: Optional[str] = None
    type: Optional[str] = None
    name: Optional[str] = None


class GetUserAnimalsParams(BaseModel):
    user_id: str


class AnimalsPayload(BaseModel):
    animals: list[FormattedAnimal]


AnimalsResult = Union[Failure, Success[AnimalsPayload]]


class GetAvailableAnimalsService:
    """Animals open for adoption, minus the ones the caller listed."""

    def __init__(self, animal_repository: AnimalLookup) -> None:
        self.__repository = animal_repository

    async def execute(self, params: GetAvailableAnimalsParams) -> AnimalsResult:
        logging.debug(f"available animals {params}")
        try:
            animals = await self.__repository.find_all_available_not_from_user(
                user_id=params.user_id,
                gender=params.gender,
                type=params.type,
                name=params.name,
            )
            formatted = AnimalFormatter.format_animals_with_images(animals)
        except (RepositoryError, AnimalFormatError) as e:
            logging.exception(e)
            return Failure.create(f"{e}")
        logging.debug(f"{len(formatted)} available animals for {params.user_id}")
        return Success[AnimalsPayload].create(AnimalsPayload(animals=formatted))


class GetUserAnimalsService:

    def __init__(self, animal_repository: AnimalLookup) -> None:
        self.__repository = animal_repository

    async def execute(self, params: GetUserAnimalsParams) -> AnimalsResult:
        logging.debug(f"user animals {params}")
        try:
            animals = await self.__repository.find_all_by_user_id(params.user_id)
            formatted = AnimalFormatter.format_animals_with_images(animals)
        except (RepositoryError, AnimalFormatError) as e:
            logging.exception(e)
            return Failure.create(f"{e}")
        logging.debug(f"{len(formatted)} animals owned by {params.user_id}")
        return Success[AnimalsPayload].create(AnimalsPayload(animals=formatted))


get_available_animals_service_instance = GetAvailableAnimalsService(
    animal_repository_instance
)

get_user_animals_service_instance = GetUserAnimalsService(
    animal_repository_instance
)
