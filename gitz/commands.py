"""
commands — The six subcommands and their dispatch.

Each handler takes the immutable Context built by cli.main(), checks its
own preconditions, and makes exactly one API call.
"""

import enum
from dataclasses import dataclass
from typing import Optional

from .api import ApiClient
from .config import PROJECT_ENV
from .errors import MissingInputError


class Command(enum.Enum):
    TODO = "todo"
    ADD = "add"
    CLOSE = "close"
    REOPEN = "reopen"
    SHOW = "show"
    EDIT = "edit"

    @classmethod
    def parse(cls, name):
        """Look up a command by name. Returns None for unknown names."""
        name = ALIASES.get(name, name)
        try:
            return cls(name)
        except ValueError:
            return None


ALIASES = {"list": "todo"}


@dataclass(frozen=True)
class Options:
    title: Optional[str] = None
    body: Optional[str] = None
    project: Optional[str] = None


@dataclass(frozen=True)
class Context:
    options: Options
    project: str
    client: ApiClient
    issue_id: Optional[str] = None


def resolve_project(options, environ):
    project = options.project or environ.get(PROJECT_ENV)
    if not project:
        raise MissingInputError("project name is required")
    return project


# ── Preconditions ────────────────────────────────────────────────────────

def _require_id(ctx):
    if not ctx.issue_id:
        raise MissingInputError("id is required")
    return ctx.issue_id


def _require_title_body(ctx):
    if not ctx.options.title:
        raise MissingInputError("title is required")
    if not ctx.options.body:
        raise MissingInputError("body is required")
    return {"title": ctx.options.title, "body": ctx.options.body}


# ── Formatting ───────────────────────────────────────────────────────────

def format_issue_line(issue):
    return f"{issue.number:>3}: {issue.title}"


def format_issue_detail(issue):
    return f"{issue.number:>3}: {issue.title} - {issue.body or ''}"


# ── Handlers ─────────────────────────────────────────────────────────────

def list_issues(ctx):
    for issue in ctx.client.list_issues():
        print(format_issue_line(issue))


def show_issue(ctx):
    number = _require_id(ctx)
    issue = ctx.client.show_issue(number)
    # an empty response is not an error
    if issue is None:
        return
    print(format_issue_detail(issue))


def add_issue(ctx):
    fields = _require_title_body(ctx)
    ctx.client.post("open", "", fields)


def edit_issue(ctx):
    number = _require_id(ctx)
    fields = _require_title_body(ctx)
    ctx.client.post("edit", number, fields)


def close_issue(ctx):
    ctx.client.post("close", _require_id(ctx))


def reopen_issue(ctx):
    ctx.client.post("reopen", _require_id(ctx))


def run_command(command, ctx):
    """Run the handler for *command*. Every Command member must appear here."""
    if command is Command.TODO:
        list_issues(ctx)
    elif command is Command.SHOW:
        show_issue(ctx)
    elif command is Command.ADD:
        add_issue(ctx)
    elif command is Command.EDIT:
        edit_issue(ctx)
    elif command is Command.CLOSE:
        close_issue(ctx)
    elif command is Command.REOPEN:
        reopen_issue(ctx)
    else:
        raise AssertionError(f"unhandled command: {command!r}")
