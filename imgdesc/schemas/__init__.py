from imgdesc.schemas.image import ImageRecord

__all__ = ["ImageRecord"]
