import asyncio
import click
import io
import logging
import random
import sys
from typing import Optional
from faker import Faker
from PIL import Image
from tabulate import tabulate
from adoption.config import app_config
from adoption.core.result import Failure
from adoption.database.database import Database
from adoption.database.fields import AnimalType, Gender
from adoption.database.models import Animal, AnimalImage
from adoption.services.animal import (
    AnimalsPayload,
    GetAvailableAnimalsParams,
    GetUserAnimalsParams,
    get_available_animals_service_instance,
    get_user_animals_service_instance,
)

fake = Faker()


def output(txt: str, color="bright_blue"):
    click.secho(txt, fg=color)


def error(e: Optional[Exception], txt: Optional[str] = None):
    if not txt:
        txt = f"{e}"
    click.secho(txt, fg="bright_red", err=True)
    if e:
        logging.debug(txt, exc_info=e)


def fake_image(size: int = 64) -> bytes:
    img = Image.new("RGB", (size, size), fake.hex_color())
    buffer = io.BytesIO()
    img.save(buffer, "PNG")
    return buffer.getvalue()


def print_animals(payload: AnimalsPayload, as_json: bool):
    if as_json:
        click.echo(payload.model_dump_json(indent=2))
        return
    headers = ["id", "name", "type", "gender", "owner", "images"]
    table = [
        [
            animal.id,
            animal.name,
            animal.type,
            animal.gender,
            animal.user_id,
            len(animal.images)
        ]
        for animal in payload.animals
    ]
    click.echo(tabulate(table, headers, tablefmt="presto"))


def run_service(service, params):
    result = asyncio.run(service.execute(params))
    if isinstance(result, Failure):
        error(None, result.message)
        sys.exit(1)
    return result.value


@click.group()
def cli():
    logging.basicConfig(level=app_config.log.level)


@cli.command("init-db")
def cli_init_db():
    Database.db.create_tables([Animal, AnimalImage])
    output("Tables created")


@cli.command("seed")
@click.option("-u", "--user", "user_id", required=True)
@click.option("-n", "--count", default=5)
@click.option("-i", "--images", "max_images", default=3)
def cli_seed(user_id: str, count: int, max_images: int):
    with Database.db.atomic():
        for _ in range(count):
            animal = Animal.create(
                name=fake.first_name(),
                type=random.choice(list(AnimalType)),
                gender=random.choice(list(Gender)),
                race=fake.word(),
                description=fake.text(max_nb_chars=120),
                user_id=user_id
            )
            images = [
                AnimalImage(animal=animal, image_data=fake_image())
                for _ in range(random.randint(0, max_images))
            ]
            if images:
                AnimalImage.bulk_create(images)
    output(f"Seeded {count} animals for {user_id}")


@cli.command("available")
@click.option("-u", "--user", "user_id", required=True)
@click.option("-g", "--gender", default=None)
@click.option("-t", "--type", "animal_type", default=None)
@click.option("-n", "--name", default=None)
@click.option("--json", "as_json", is_flag=True, default=False)
def cli_available(
    user_id: str,
    gender: Optional[str],
    animal_type: Optional[str],
    name: Optional[str],
    as_json: bool
):
    payload = run_service(
        get_available_animals_service_instance,
        GetAvailableAnimalsParams(
            user_id=user_id,
            gender=gender,
            type=animal_type,
            name=name
        )
    )
    print_animals(payload, as_json)


@cli.command("mine")
@click.option("-u", "--user", "user_id", required=True)
@click.option("--json", "as_json", is_flag=True, default=False)
def cli_mine(user_id: str, as_json: bool):
    payload = run_service(
        get_user_animals_service_instance,
        GetUserAnimalsParams(user_id=user_id)
    )
    print_animals(payload, as_json)


if __name__ == "__main__":
    cli()
