from playhouse.db_url import connect, register_database
from playhouse.postgres_ext import PostgresqlExtDatabase
from playhouse.shortcuts import ReconnectMixin
from peewee import Database as PeeweeDatabase
from adoption.config import app_config
from typing import Optional


class ReconnectingDB(ReconnectMixin, PostgresqlExtDatabase):
    pass


register_database(ReconnectingDB, "postgres", "postgresql")


class DatabaseMeta(type):
    _instance: Optional['Database'] = None

    def __call__(cls, *args, **kwargs):
        if not cls._instance:
            cls._instance = type.__call__(cls, *args, **kwargs)
        return cls._instance

    @property
    def db(cls) -> PeeweeDatabase:
        return cls().get_db()


class Database(object, metaclass=DatabaseMeta):

    def __init__(self):
        self.__db = connect(app_config.db.url)

    def get_db(self) -> PeeweeDatabase:
        return self.__db
