# Where: ytdtd.features.manifest.__init__
# What: Expose manifest formats, serializers and the writer.
# Why: Let the packager and CLI pick a schema without importing concrete modules.

from .serializers import (
    JsonManifestSerializer,
    ManifestFormat,
    ManifestSerializer,
    TomlManifestSerializer,
    get_serializer,
    toml_string,
    toml_string_array,
    write_manifest,
)

__all__ = [
    "JsonManifestSerializer",
    "ManifestFormat",
    "ManifestSerializer",
    "TomlManifestSerializer",
    "get_serializer",
    "toml_string",
    "toml_string_array",
    "write_manifest",
]
