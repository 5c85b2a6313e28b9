from xmlsieve._meta import __version__, logger
from xmlsieve.builder import TreeBuilder, build_tree
from xmlsieve.convert import BOOL, FLOAT, INT, STRING, AttributeConverter, AttributeKind, custom
from xmlsieve.errors import (
    CustomConverterMissingError,
    DocumentError,
    ForbiddenMarkupError,
    MalformedDocumentError,
    NoMatchError,
    SourceUnavailableError,
    TemplateError,
    XmlSieveError,
)
from xmlsieve.loader import load_document, load_string
from xmlsieve.model import Element
from xmlsieve.schema import ElementSchema, Template
from xmlsieve.templates import load_template, template_from_mapping

__all__ = [
    "BOOL",
    "FLOAT",
    "INT",
    "STRING",
    "AttributeConverter",
    "AttributeKind",
    "CustomConverterMissingError",
    "DocumentError",
    "Element",
    "ElementSchema",
    "ForbiddenMarkupError",
    "MalformedDocumentError",
    "NoMatchError",
    "SourceUnavailableError",
    "Template",
    "TemplateError",
    "TreeBuilder",
    "XmlSieveError",
    "__version__",
    "build_tree",
    "custom",
    "load_document",
    "load_string",
    "load_template",
    "logger",
    "template_from_mapping",
]
