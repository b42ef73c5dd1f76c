from peewee import Model
from .database import Database
from .fields import AnimalTypeField, GenderField
from playhouse.shortcuts import model_to_dict
from peewee import (
    BlobField,
    BooleanField,
    CharField,
    DateTimeField,
    ForeignKeyField,
    TextField,
)
from uuid import uuid4
import datetime


def get_default_id():
    return uuid4().hex


class DbModel(Model):
    def to_dict(self):
        return model_to_dict(self)


class Animal(DbModel):
    id = CharField(primary_key=True, max_length=32, default=get_default_id)
    name = CharField(max_length=200)
    type = AnimalTypeField(max_length=20)
    gender = GenderField(max_length=10)
    race = CharField(max_length=200, null=True)
    description = TextField(null=True)
    adopted = BooleanField(default=False)
    user_id = CharField(max_length=64, index=True)
    created_at = DateTimeField(default=datetime.datetime.now)

    class Meta:
        database = Database.db
        table_name = 'animal'


class AnimalImage(DbModel):
    animal = ForeignKeyField(Animal, backref="images", on_delete="CASCADE")
    image_data = BlobField()

    class Meta:
        database = Database.db
        table_name = 'animal_image'
