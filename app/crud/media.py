from app.crud.base import CRUDBase
from app.models.media import Media
from app.schemas.media import MediaCreate

class CRUDMedia(CRUDBase[Media, MediaCreate, MediaCreate]):
    pass

media = CRUDMedia(Media)
