"""Kinds of resources a permission check can target."""

from enum import StrEnum


class ResourceType(StrEnum):
    WORKSPACE = "workspace"
    SPACE = "space"
    FOLDER = "folder"
    LIST = "list"
    TASK = "task"
    TABLE = "table"
