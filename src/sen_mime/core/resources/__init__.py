from sen_mime.core.resources.abc import (
    LONG_DESCRIPTION_TYPE,
    MESSAGE_TYPE,
    SHORT_DESCRIPTION_TYPE,
    SIGNATURE_TYPE,
    STRING_TYPE,
    VECTOR_ICON_TYPE,
    ResourceContainer,
    ResourceData,
    Resources,
    ResourceValue,
)
from sen_mime.core.resources.fake import FakeResourceContainer, FakeResources
from sen_mime.core.resources.real import TomlResourceContainer, TomlResources

__all__ = [
    "LONG_DESCRIPTION_TYPE",
    "MESSAGE_TYPE",
    "SHORT_DESCRIPTION_TYPE",
    "SIGNATURE_TYPE",
    "STRING_TYPE",
    "VECTOR_ICON_TYPE",
    "FakeResourceContainer",
    "FakeResources",
    "ResourceContainer",
    "ResourceData",
    "ResourceValue",
    "Resources",
    "TomlResourceContainer",
    "TomlResources",
]
