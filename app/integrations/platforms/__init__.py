from .commerce import CommercePlatform
from .shortvideo import ShortVideoPlatform
from .photoshare import PhotoSharePlatform
