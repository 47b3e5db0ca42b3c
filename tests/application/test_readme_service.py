import pytest

from solid_principles.application.readme_service import ReadmeService
from solid_principles.domain.exceptions import ReadmeOutOfSyncError

ALL_KEYS = [
    f"{acronym}/{variant}"
    for acronym in ("SRP", "OCP", "LSP", "ISP", "DIP")
    for variant in ("bad", "good")
]


def test_repository_readme_is_in_sync(readme_service):
    # Act
    report = readme_service.check()

    # Assert
    assert report.found
    assert report.mismatched == []
    assert report.missing == []
    assert report.unexpected == []
    assert report.matched == ALL_KEYS
    assert report.in_sync


def test_ensure_in_sync_passes_for_repository_readme(readme_service):
    assert readme_service.ensure_in_sync().in_sync


def test_rendered_readme_embeds_every_snippet(readme_service, snippet_source, registry):
    rendered = readme_service.render()

    for principle in registry.list_principles():
        assert f"## {principle.id.value}: {principle.name}" in rendered
        for snippet in principle.snippets():
            assert f"```python\n{snippet_source.read(snippet)}```" in rendered


def test_rendered_readme_passes_check(readme_service):
    report = readme_service.check_text(readme_service.render())

    assert report.matched == ALL_KEYS
    assert report.in_sync


def test_edited_block_is_mismatched(readme_service, readme_path):
    text = readme_path.read_text().replace("def save_data(self)", "def persist(self)")

    report = readme_service.check_text(text)

    assert report.mismatched == ["SRP/bad"]
    assert not report.in_sync


def test_trailing_blank_lines_are_ignored(readme_service, readme_path):
    text = readme_path.read_text().replace(
        "        ...\n```\n\n### Good", "        ...\n\n\n```\n\n### Good", 1
    )

    assert readme_service.check_text(text).in_sync


def test_removed_section_is_missing(readme_service):
    rendered = readme_service.render()
    start = rendered.index("## DIP:")
    end = rendered.index("## Checking the examples")

    report = readme_service.check_text(rendered[:start] + rendered[end:])

    assert report.missing == ["DIP/bad", "DIP/good"]


def test_unknown_python_block_is_unexpected(readme_service):
    text = readme_service.render() + "\n## Extra\n\n```python\nprint('hi')\n```\n"

    report = readme_service.check_text(text)

    assert len(report.unexpected) == 1
    assert report.unexpected[0].startswith("line ")


def test_duplicate_block_is_unexpected(readme_service):
    rendered = readme_service.render()
    start = rendered.index("## SRP:")
    end = rendered.index("## OCP:")

    report = readme_service.check_text(rendered + "\n" + rendered[start:end])

    assert len(report.unexpected) == 2
    assert report.missing == []


def test_other_languages_are_ignored(readme_service):
    text = readme_service.render() + "\n```bash\nsolid-principles readme check\n```\n"

    assert readme_service.check_text(text).in_sync


def test_longer_and_tilde_fences_do_not_swallow_sections(readme_service):
    rendered = readme_service.render()
    start = rendered.index("## SRP:")
    text = rendered[:start] + "````text\nexample\n```\n````\n\n~~~\nmore\n~~~\n\n" + rendered[start:]

    report = readme_service.check_text(text)

    assert report.missing == []
    assert report.in_sync


def test_missing_readme_file(readme_service, tmp_path):
    report = readme_service.check(str(tmp_path / "absent.md"))

    assert not report.found
    assert report.missing == ALL_KEYS
    assert not report.in_sync


def test_ensure_in_sync_raises(readme_service, tmp_path):
    path = tmp_path / "README.md"
    path.write_text("# Nothing here\n")

    with pytest.raises(ReadmeOutOfSyncError) as excinfo:
        readme_service.ensure_in_sync(str(path))

    assert excinfo.value.missing == ALL_KEYS


def test_write_creates_parent_directories(readme_service, tmp_path):
    target = tmp_path / "docs" / "README.md"

    written = readme_service.write(str(target))

    assert written == str(target)
    assert target.read_text() == readme_service.render()
    assert readme_service.check(str(target)).in_sync


def test_check_uses_configured_language(registry, renderer, snippet_source, mock_logger):
    service = ReadmeService(registry, renderer, snippet_source, mock_logger, language="py")
    text = service.render().replace("```python", "```py")

    assert service.check_text(text).in_sync


def test_report_to_dict(readme_service):
    data = readme_service.check().to_dict()

    assert data["in_sync"] is True
    assert data["found"] is True
    assert len(data["matched"]) == 10
