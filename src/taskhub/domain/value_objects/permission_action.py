"""Permission actions for workspace RBAC."""

from enum import StrEnum


class PermissionAction(StrEnum):
    """Actions that can be checked against the permission resolver."""

    # Workspace
    DELETE_WORKSPACE = "DELETE_WORKSPACE"
    UPDATE_WORKSPACE = "UPDATE_WORKSPACE"
    INVITE_MEMBER = "INVITE_MEMBER"
    REMOVE_MEMBER = "REMOVE_MEMBER"
    CHANGE_MEMBER_ROLE = "CHANGE_MEMBER_ROLE"
    VIEW_WORKSPACE = "VIEW_WORKSPACE"
    LEAVE_WORKSPACE = "LEAVE_WORKSPACE"

    # Space
    CREATE_SPACE = "CREATE_SPACE"
    DELETE_SPACE = "DELETE_SPACE"
    UPDATE_SPACE = "UPDATE_SPACE"
    VIEW_SPACE = "VIEW_SPACE"
    ADD_SPACE_MEMBER = "ADD_SPACE_MEMBER"
    REMOVE_SPACE_MEMBER = "REMOVE_SPACE_MEMBER"
    MANAGE_SPACE_PERMISSIONS = "MANAGE_SPACE_PERMISSIONS"

    # Folder
    CREATE_FOLDER = "CREATE_FOLDER"
    DELETE_FOLDER = "DELETE_FOLDER"
    UPDATE_FOLDER = "UPDATE_FOLDER"
    VIEW_FOLDER = "VIEW_FOLDER"

    # List
    CREATE_LIST = "CREATE_LIST"
    DELETE_LIST = "DELETE_LIST"
    UPDATE_LIST = "UPDATE_LIST"
    VIEW_LIST = "VIEW_LIST"

    # Task
    CREATE_TASK = "CREATE_TASK"
    DELETE_TASK = "DELETE_TASK"
    EDIT_TASK = "EDIT_TASK"
    VIEW_TASK = "VIEW_TASK"
    ASSIGN_TASK = "ASSIGN_TASK"
    CHANGE_STATUS = "CHANGE_STATUS"
    COMMENT_TASK = "COMMENT_TASK"

    # Settings and analytics
    MANAGE_SETTINGS = "MANAGE_SETTINGS"
    VIEW_ANALYTICS = "VIEW_ANALYTICS"
    VIEW_ACTIVITY_LOG = "VIEW_ACTIVITY_LOG"
