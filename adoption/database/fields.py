from peewee import CharField
from enum import StrEnum
from typing import Optional


class AnimalType(StrEnum):
    DOG = "dog"
    CAT = "cat"
    BIRD = "bird"
    RABBIT = "rabbit"
    RODENT = "rodent"
    OTHER = "other"

    @classmethod
    def values(cls):
        return [member.value for member in cls.__members__.values()]

    @classmethod
    def parse(cls, value: str) -> Optional['AnimalType']:
        return cls(value.lower()) if value.lower() in cls.values() else None


class Gender(StrEnum):
    MALE = "male"
    FEMALE = "female"

    @classmethod
    def values(cls):
        return [member.value for member in cls.__members__.values()]

    @classmethod
    def parse(cls, value: str) -> Optional['Gender']:
        return cls(value.lower()) if value.lower() in cls.values() else None


class AnimalTypeField(CharField):

    def db_value(self, value: AnimalType | str):
        return AnimalType(value).value

    def python_value(self, value):
        return AnimalType(value)


class GenderField(CharField):

    def db_value(self, value: Gender | str):
        return Gender(value).value

    def python_value(self, value):
        return Gender(value)
