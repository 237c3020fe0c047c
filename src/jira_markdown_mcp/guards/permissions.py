"""Permission sets defining read-only vs write tool groups."""

READ_TOOLS = frozenset({
    "get_issue",
    "list_issue_types",
    "get_comments",
})

WRITE_TOOLS = frozenset({
    "create_issue",
    "create_child_issue",
    "update_issue",
    "delete_issue",
    "add_comment",
})

ALL_TOOLS = READ_TOOLS | WRITE_TOOLS
