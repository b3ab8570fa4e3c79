"""Tests for disposition resolution."""

import pytest
from rmd.safety.models import (
    Category,
    ClassifiedPath,
    Disposition,
    Flags,
    PathReference,
    PromptKind,
)
from rmd.safety.resolver import parse_response, resolve


def _target(
    category: Category = Category.PLAIN_FILE,
    raw: str = "notes.txt",
    exists: bool = True,
    reason: str | None = None,
) -> ClassifiedPath:
    """Create a ClassifiedPath without touching the filesystem."""
    return ClassifiedPath(
        ref=PathReference(raw=raw, absolute=f"/tmp/work/{raw}"),
        category=category,
        reason=reason,
        exists=exists,
        is_directory=category == Category.DIRECTORY,
        is_config=category == Category.CONFIG,
    )


def _never_prompt(kind: PromptKind, path: str) -> str:
    msg = f"Prompt should not be shown for {path}"
    raise AssertionError(msg)


ALL_FLAG_COMBINATIONS = [
    Flags(force=force, recursive=recursive)
    for force in (False, True)
    for recursive in (False, True)
]


class TestParseResponse:
    """Tests for parse_response."""

    @pytest.mark.parametrize("answer", ["y", "Y", "yes", "YES", "Yes", "", "  y  ", "\n"])
    def test_trash_answers(self, answer: str) -> None:
        """y, yes and empty input move to trash."""
        assert parse_response(answer) == Disposition.TRASH

    @pytest.mark.parametrize("answer", ["n", "N", "no", "NO"])
    def test_cancel_answers(self, answer: str) -> None:
        """n and no cancel."""
        assert parse_response(answer) == Disposition.CANCEL

    def test_uppercase_d_deletes_permanently(self) -> None:
        """Only uppercase D deletes permanently."""
        assert parse_response("D") == Disposition.PERMANENT_DELETE
        assert parse_response(" D ") == Disposition.PERMANENT_DELETE

    @pytest.mark.parametrize("answer", ["d", "delete", "DD", "x", "yy", "nope"])
    def test_unrecognized_answers_cancel(self, answer: str) -> None:
        """Anything unrecognized, including lowercase d, cancels."""
        assert parse_response(answer) == Disposition.CANCEL


class TestResolveTerminalStates:
    """Tests for NOT_FOUND and BLOCKED."""

    @pytest.mark.parametrize("flags", ALL_FLAG_COMBINATIONS)
    def test_missing_is_not_found(self, flags: Flags) -> None:
        """Missing targets are NOT_FOUND without prompting."""
        result = resolve(_target(exists=False), flags, _never_prompt)

        assert result.disposition == Disposition.NOT_FOUND

    @pytest.mark.parametrize("flags", ALL_FLAG_COMBINATIONS)
    def test_protected_is_blocked(self, flags: Flags) -> None:
        """Protected targets are BLOCKED regardless of flags."""
        target = _target(
            Category.SYSTEM_PROTECTED,
            raw="/etc/hosts",
            reason="protected system directory (/etc)",
        )

        result = resolve(target, flags, _never_prompt)

        assert result.disposition == Disposition.BLOCKED
        assert result.target.reason == "protected system directory (/etc)"

    def test_home_directory_is_blocked(self) -> None:
        """The home directory is BLOCKED even under --force."""
        target = _target(Category.HOME_DIRECTORY, reason="protected home directory")

        result = resolve(target, Flags(force=True, recursive=True), _never_prompt)

        assert result.disposition == Disposition.BLOCKED

    def test_missing_takes_precedence_over_protection(self) -> None:
        """Existence is checked before protection."""
        target = _target(Category.SYSTEM_PROTECTED, exists=False, reason="x")

        result = resolve(target, Flags(), _never_prompt)

        assert result.disposition == Disposition.NOT_FOUND


class TestResolveDirectories:
    """Tests for directory targets."""

    def test_force_recursive_trashes(self) -> None:
        """--force --recursive trashes a directory without prompting."""
        result = resolve(
            _target(Category.DIRECTORY, raw="build"),
            Flags(force=True, recursive=True),
            _never_prompt,
        )

        assert result.disposition == Disposition.TRASH
        assert result.needs_recursive is True
        assert result.recursion_refused is False
        assert result.prompt_kind is None

    def test_force_without_recursive_is_refused(self) -> None:
        """--force alone does not allow removing a directory."""
        result = resolve(_target(Category.DIRECTORY), Flags(force=True), _never_prompt)

        assert result.disposition == Disposition.TRASH
        assert result.recursion_refused is True

    def test_prompt_uses_folder_variant(self, make_prompt: type) -> None:
        """Interactive mode shows the folder prompt with the raw path."""
        prompt = make_prompt("Y")

        result = resolve(_target(Category.DIRECTORY, raw="build/"), Flags(recursive=True), prompt)

        assert prompt.calls == [(PromptKind.FOLDER, "build/")]
        assert result.disposition == Disposition.TRASH
        assert result.prompt_kind == PromptKind.FOLDER
        assert result.recursion_refused is False

    def test_affirmative_answer_without_recursive_is_refused(self, make_prompt: type) -> None:
        """A yes answer still needs --recursive."""
        result = resolve(_target(Category.DIRECTORY), Flags(), make_prompt("y"))

        assert result.disposition == Disposition.TRASH
        assert result.recursion_refused is True

    def test_permanent_delete_without_recursive_is_refused(self, make_prompt: type) -> None:
        """A D answer still needs --recursive."""
        result = resolve(_target(Category.DIRECTORY), Flags(), make_prompt("D"))

        assert result.disposition == Disposition.PERMANENT_DELETE
        assert result.recursion_refused is True

    def test_cancel_without_recursive_is_plain_cancel(self, make_prompt: type) -> None:
        """Cancelling never turns into a recursion error."""
        result = resolve(_target(Category.DIRECTORY), Flags(), make_prompt("n"))

        assert result.disposition == Disposition.CANCEL
        assert result.recursion_refused is False

    def test_permanent_delete_with_recursive(self, make_prompt: type) -> None:
        """D with --recursive is a recursive permanent delete."""
        result = resolve(_target(Category.DIRECTORY), Flags(recursive=True), make_prompt("D"))

        assert result.disposition == Disposition.PERMANENT_DELETE
        assert result.needs_recursive is True
        assert result.recursion_refused is False


class TestResolveFiles:
    """Tests for non-directory targets."""

    def test_force_trashes_without_prompt(self) -> None:
        """--force trashes files without prompting, even config files."""
        for category in (Category.PLAIN_FILE, Category.CONFIG):
            result = resolve(_target(category), Flags(force=True), _never_prompt)

            assert result.disposition == Disposition.TRASH
            assert result.needs_recursive is False
            assert result.prompt_kind is None

    def test_config_file_uses_config_prompt(self, make_prompt: type) -> None:
        """Hidden/config files show the config warning."""
        prompt = make_prompt("")

        result = resolve(_target(Category.CONFIG, raw=".profile"), Flags(), prompt)

        assert prompt.calls == [(PromptKind.CONFIG, ".profile")]
        assert result.disposition == Disposition.TRASH

    def test_plain_file_uses_delete_prompt(self, make_prompt: type) -> None:
        """Plain files show the delete prompt."""
        prompt = make_prompt("n")

        result = resolve(_target(raw="notes.txt"), Flags(), prompt)

        assert prompt.calls == [(PromptKind.DELETE, "notes.txt")]
        assert result.disposition == Disposition.CANCEL

    def test_recursive_flag_irrelevant_for_files(self, make_prompt: type) -> None:
        """Files never need --recursive."""
        result = resolve(_target(), Flags(), make_prompt("D"))

        assert result.disposition == Disposition.PERMANENT_DELETE
        assert result.needs_recursive is False
        assert result.recursion_refused is False
