"""Permission matrix - which role or override level allows which actions.

Every table is static and immutable. An action missing from a table is
denied, so a newly added PermissionAction grants nothing until it is
classified here.
"""

from collections.abc import Mapping
from types import MappingProxyType

from taskhub.domain.value_objects import (
    FolderPermissionLevel,
    ListPermissionLevel,
    PermissionAction,
    SpacePermissionLevel,
    WorkspaceRole,
)

A = PermissionAction

_WORKSPACE_ACTIONS = frozenset({
    A.DELETE_WORKSPACE,
    A.UPDATE_WORKSPACE,
    A.INVITE_MEMBER,
    A.REMOVE_MEMBER,
    A.CHANGE_MEMBER_ROLE,
    A.VIEW_WORKSPACE,
    A.LEAVE_WORKSPACE,
})

_SPACE_MANAGEMENT_ACTIONS = frozenset({
    A.CREATE_SPACE,
    A.DELETE_SPACE,
    A.UPDATE_SPACE,
    A.VIEW_SPACE,
    A.ADD_SPACE_MEMBER,
    A.REMOVE_SPACE_MEMBER,
    A.MANAGE_SPACE_PERMISSIONS,
})

_FOLDER_ACTIONS = frozenset({A.CREATE_FOLDER, A.DELETE_FOLDER, A.UPDATE_FOLDER, A.VIEW_FOLDER})

_LIST_ACTIONS = frozenset({A.CREATE_LIST, A.DELETE_LIST, A.UPDATE_LIST, A.VIEW_LIST})

TASK_ACTIONS = frozenset({
    A.CREATE_TASK,
    A.DELETE_TASK,
    A.EDIT_TASK,
    A.VIEW_TASK,
    A.ASSIGN_TASK,
    A.CHANGE_STATUS,
    A.COMMENT_TASK,
})

# Actions a plain member may only perform inside spaces whose roster includes them.
SPACE_ACTIONS = frozenset({
    A.CREATE_FOLDER,
    A.DELETE_FOLDER,
    A.UPDATE_FOLDER,
    A.CREATE_LIST,
    A.DELETE_LIST,
    A.UPDATE_LIST,
    A.CREATE_TASK,
    A.DELETE_TASK,
    A.EDIT_TASK,
    A.ASSIGN_TASK,
    A.CHANGE_STATUS,
})

SPACE_VIEW_ONLY_ACTIONS = frozenset({
    A.VIEW_SPACE,
    A.VIEW_FOLDER,
    A.VIEW_LIST,
    A.VIEW_TASK,
    A.COMMENT_TASK,
})

# Granted to the task's assignee when the workspace role alone denies them.
ASSIGNEE_ACTIONS = frozenset({A.EDIT_TASK, A.CHANGE_STATUS})


ROLE_PERMISSIONS: Mapping[WorkspaceRole, frozenset[PermissionAction]] = MappingProxyType({
    WorkspaceRole.OWNER: (
        _WORKSPACE_ACTIONS
        | _SPACE_MANAGEMENT_ACTIONS
        | _FOLDER_ACTIONS
        | _LIST_ACTIONS
        | TASK_ACTIONS
        | {A.MANAGE_SETTINGS, A.VIEW_ANALYTICS, A.VIEW_ACTIVITY_LOG}
    ),
    # Everything except destroying or reconfiguring the workspace itself.
    WorkspaceRole.ADMIN: (
        frozenset({A.INVITE_MEMBER, A.REMOVE_MEMBER, A.VIEW_WORKSPACE, A.LEAVE_WORKSPACE})
        | _SPACE_MANAGEMENT_ACTIONS
        | _FOLDER_ACTIONS
        | _LIST_ACTIONS
        | TASK_ACTIONS
        | {A.VIEW_ANALYTICS, A.VIEW_ACTIVITY_LOG}
    ),
    WorkspaceRole.MEMBER: frozenset({
        A.VIEW_WORKSPACE,
        A.LEAVE_WORKSPACE,
        A.VIEW_SPACE,
        A.VIEW_FOLDER,
        A.VIEW_LIST,
        A.VIEW_TASK,
        A.COMMENT_TASK,
        A.VIEW_ACTIVITY_LOG,
    }),
    WorkspaceRole.GUEST: frozenset({
        A.VIEW_WORKSPACE,
        A.VIEW_SPACE,
        A.VIEW_FOLDER,
        A.VIEW_LIST,
        A.VIEW_TASK,
        A.COMMENT_TASK,
    }),
})


def _scope_table(
    full: frozenset[PermissionAction],
    edit: frozenset[PermissionAction],
    comment: frozenset[PermissionAction],
    view: frozenset[PermissionAction],
) -> dict[str, frozenset[PermissionAction]]:
    # Each argument lists only what that level adds over the level below it.
    comment = comment | view
    edit = edit | comment
    full = full | edit
    return {"FULL": full, "EDIT": edit, "COMMENT": comment, "VIEW": view}


_space = _scope_table(
    full=frozenset({
        A.UPDATE_SPACE,
        A.CREATE_FOLDER,
        A.DELETE_FOLDER,
        A.UPDATE_FOLDER,
        A.DELETE_LIST,
        A.UPDATE_LIST,
        A.DELETE_TASK,
        A.ASSIGN_TASK,
    }),
    edit=frozenset({
        A.CREATE_LIST,
        A.CREATE_TASK,
        A.EDIT_TASK,
        A.CHANGE_STATUS,
        A.VIEW_ACTIVITY_LOG,
    }),
    comment=frozenset({A.COMMENT_TASK}),
    view=frozenset({A.VIEW_SPACE, A.VIEW_FOLDER, A.VIEW_LIST, A.VIEW_TASK}),
)

SPACE_PERMISSION_ACTIONS: Mapping[SpacePermissionLevel, frozenset[PermissionAction]] = (
    MappingProxyType({level: _space[level.value] for level in SpacePermissionLevel})
)

_folder = _scope_table(
    full=frozenset({
        A.UPDATE_FOLDER,
        A.DELETE_LIST,
        A.UPDATE_LIST,
        A.DELETE_TASK,
        A.ASSIGN_TASK,
    }),
    edit=frozenset({
        A.CREATE_LIST,
        A.CREATE_TASK,
        A.EDIT_TASK,
        A.CHANGE_STATUS,
        A.VIEW_ACTIVITY_LOG,
    }),
    comment=frozenset({A.COMMENT_TASK}),
    view=frozenset({A.VIEW_FOLDER, A.VIEW_LIST, A.VIEW_TASK}),
)

FOLDER_PERMISSION_ACTIONS: Mapping[FolderPermissionLevel, frozenset[PermissionAction]] = (
    MappingProxyType({level: _folder[level.value] for level in FolderPermissionLevel})
)

_list = _scope_table(
    full=frozenset({A.UPDATE_LIST, A.DELETE_TASK, A.ASSIGN_TASK}),
    edit=frozenset({A.CREATE_TASK, A.EDIT_TASK, A.CHANGE_STATUS, A.VIEW_ACTIVITY_LOG}),
    comment=frozenset({A.COMMENT_TASK}),
    view=frozenset({A.VIEW_LIST, A.VIEW_TASK}),
)

LIST_PERMISSION_ACTIONS: Mapping[ListPermissionLevel, frozenset[PermissionAction]] = (
    MappingProxyType({level: _list[level.value] for level in ListPermissionLevel})
)

del _space, _folder, _list


def role_has_permission(role: WorkspaceRole | str, action: PermissionAction) -> bool:
    """Check if a workspace role allows an action."""
    return action in ROLE_PERMISSIONS.get(role, frozenset())


def space_permission_has_action(level: SpacePermissionLevel | str, action: PermissionAction) -> bool:
    """Check if a space override level allows an action."""
    return action in SPACE_PERMISSION_ACTIONS.get(level, frozenset())


def folder_permission_has_action(
    level: FolderPermissionLevel | str, action: PermissionAction
) -> bool:
    """Check if a folder override level allows an action."""
    return action in FOLDER_PERMISSION_ACTIONS.get(level, frozenset())


def list_permission_has_action(level: ListPermissionLevel | str, action: PermissionAction) -> bool:
    """Check if a list override level allows an action."""
    return action in LIST_PERMISSION_ACTIONS.get(level, frozenset())


def is_task_action(action: PermissionAction) -> bool:
    return action in TASK_ACTIONS


def is_space_action(action: PermissionAction) -> bool:
    return action in SPACE_ACTIONS
