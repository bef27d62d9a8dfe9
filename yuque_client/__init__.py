"""Typed client for the Yuque documentation API."""

from yuque_client.client import Yuque
from yuque_client.core.errors import (
    FieldTypeMismatch,
    InternalError,
    InvalidParams,
    InvalidUserInfo,
    MalformedStructuredText,
    MetadataMissing,
    NoPermission,
    NotFound,
    NotSupportFormat,
    RequestFailed,
    ServerException,
    TocError,
    UnknownTocEntryType,
    YuqueError,
)
from yuque_client.models.doc import Doc, DocDetail, DocListItem
from yuque_client.models.repo import Repo, RepoDetail, RepoListItem, RepoType
from yuque_client.models.toc import Toc, TocDoc, TocMeta, TocTitle
from yuque_client.toc import META_BLOCK_LINES, decode_toc, encode_toc

__version__ = "0.1.0"

__all__ = [
    "Yuque",
    "YuqueError",
    "InternalError",
    "RequestFailed",
    "InvalidParams",
    "InvalidUserInfo",
    "NoPermission",
    "NotFound",
    "ServerException",
    "NotSupportFormat",
    "TocError",
    "MetadataMissing",
    "MalformedStructuredText",
    "UnknownTocEntryType",
    "FieldTypeMismatch",
    "Doc",
    "DocDetail",
    "DocListItem",
    "Repo",
    "RepoDetail",
    "RepoListItem",
    "RepoType",
    "Toc",
    "TocDoc",
    "TocMeta",
    "TocTitle",
    "META_BLOCK_LINES",
    "decode_toc",
    "encode_toc",
]
