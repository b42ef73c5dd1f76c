from pydantic import BaseModel, ConfigDict
from datetime import datetime
from typing import Optional
from adoption.database.fields import AnimalType, Gender


class AnimalBase(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    type: AnimalType
    gender: Gender
    race: Optional[str] = None
    description: Optional[str] = None
    adopted: bool = False
    user_id: str
    created_at: datetime


class AnimalImageData(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: Optional[int] = None
    animal_id: str
    image_data: bytes


class AnimalWithImages(AnimalBase):
    images: list[AnimalImageData] = []


class FormattedAnimal(AnimalBase):
    images: list[str] = []
