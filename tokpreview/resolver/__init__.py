"""TikTok preview metadata resolution."""

from .chain import MetadataResolver, build_resolver, build_strategies, resolve_many
from .parsers import (
    coerce_view_count,
    extract_markdown_images,
    extract_markdown_title,
    parse_json_slice,
    pick_cover,
)
from .relay import RelayClient, encode_uri_component
from .strategies import AggregatorStrategy, MetadataStrategy, OEmbedStrategy, PageTextStrategy

__all__ = [
    "AggregatorStrategy",
    "MetadataResolver",
    "MetadataStrategy",
    "OEmbedStrategy",
    "PageTextStrategy",
    "RelayClient",
    "build_resolver",
    "build_strategies",
    "coerce_view_count",
    "encode_uri_component",
    "extract_markdown_images",
    "extract_markdown_title",
    "parse_json_slice",
    "pick_cover",
    "resolve_many",
]
