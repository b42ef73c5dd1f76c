import base64
from typing import Sequence
from adoption.models import AnimalImageData, AnimalWithImages, FormattedAnimal

BINARY_TYPES = (bytes, bytearray, memoryview)


class AnimalFormatError(ValueError):
    pass


def encode_image(data: bytes | bytearray | memoryview) -> str:
    if not isinstance(data, BINARY_TYPES):
        raise AnimalFormatError(
            f"expected binary image data, got {type(data).__name__}"
        )
    return base64.b64encode(data).decode("ascii")


class AnimalFormatter:

    @staticmethod
    def format_animals_with_images(
        animals: Sequence[AnimalWithImages],
    ) -> list[FormattedAnimal]:
        """Replace every image record with the base64 text of its payload.

        Output keeps the order of ``animals`` and of each animal's images.
        The input records are left untouched.
        """
        return [
            FormattedAnimal(
                **animal.model_dump(exclude={"images"}),
                images=[
                    AnimalFormatter._encode(animal, idx, image)
                    for idx, image in enumerate(animal.images)
                ],
            )
            for animal in animals
        ]

    @staticmethod
    def _encode(
        animal: AnimalWithImages, idx: int, image: AnimalImageData
    ) -> str:
        try:
            return encode_image(getattr(image, "image_data", None))
        except AnimalFormatError as e:
            raise AnimalFormatError(
                f"animal {animal.id}: image #{idx}: {e}"
            ) from e
