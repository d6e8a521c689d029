import uuid
from pathlib import Path

from fastapi import UploadFile

import config
from utils import setup_logger

logger = setup_logger("catalog.uploads")

ALLOWED_EXTENSIONS = {'.jpg', '.jpeg', '.png', '.gif', '.webp'}


class ImageUploadError(ValueError):
    pass


class ImageService:
    @staticmethod
    def public_url(filename: str) -> str:
        return f"/uploads/{filename}"

    @staticmethod
    async def save_image(image: UploadFile, upload_dir: Path = None) -> str:
        """Validate and store an uploaded image; returns the stored filename."""
        upload_dir = Path(upload_dir or config.UPLOADS_DIR)

        file_ext = Path(image.filename or "").suffix.lower()
        if file_ext not in ALLOWED_EXTENSIONS:
            raise ImageUploadError(
                f"Invalid file type. Allowed types: {', '.join(sorted(ALLOWED_EXTENSIONS))}"
            )
        if image.content_type and not image.content_type.startswith("image/"):
            raise ImageUploadError("Only image files are allowed")

        contents = await image.read()
        if len(contents) > config.MAX_UPLOAD_SIZE:
            raise ImageUploadError(
                f"File too large. Maximum size is {config.MAX_UPLOAD_SIZE} bytes"
            )

        unique_filename = f"{uuid.uuid4()}{file_ext}"
        upload_dir.mkdir(parents=True, exist_ok=True)
        with open(upload_dir / unique_filename, "wb") as buffer:
            buffer.write(contents)

        logger.info("Stored image %s (%d bytes)", unique_filename, len(contents))
        return unique_filename
