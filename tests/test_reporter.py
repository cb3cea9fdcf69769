from domain.models import (
    CheckStatus,
    DiffResult,
    FileState,
    RunStatistics,
    TableLanguageResult,
)
from services import reporter
from services.pipeline import run_check

EN = "/p/App/en.lproj/Localizable.strings"
FR = "/p/App/fr.lproj/Localizable.strings"


def _result(state=FileState.PRESENT, missing=(), unused=(), base_values=None):
    return TableLanguageResult(
        table_identity="/p/App/*.lproj/Localizable.strings",
        language="fr",
        path=FR,
        state=state,
        encoding="utf-8" if state is FileState.PRESENT else None,
        diff=DiffResult(missing_keys=list(missing), unused_keys=list(unused)),
        base_values=base_values or {},
    )


def test_status_priority():
    assert reporter.status_for(RunStatistics()) is CheckStatus.LOOKS_GOOD
    assert reporter.status_for(RunStatistics(unused_string_count=2)) is CheckStatus.INCONSISTENT
    assert (
        reporter.status_for(RunStatistics(missing_string_count=1, unused_string_count=2))
        is CheckStatus.INCOMPLETE
    )
    assert reporter.status_for(RunStatistics(missing_file_count=1)) is CheckStatus.INCOMPLETE


def test_summary_sentences():
    s = reporter.summary_sentence
    assert s(RunStatistics()) == "Localization looks good."
    assert s(RunStatistics(missing_string_count=1)) == "Localization is incomplete! 1 string is missing."
    assert s(RunStatistics(missing_string_count=3)) == "Localization is incomplete! 3 strings are missing."
    assert s(RunStatistics(missing_file_count=1)) == "Localization is incomplete! 1 file is missing."
    assert (
        s(RunStatistics(missing_file_count=1, missing_string_count=1))
        == "Localization is incomplete! 1 file and 1 string are missing."
    )
    assert (
        s(RunStatistics(missing_file_count=2, missing_string_count=4, unused_string_count=1))
        == "Localization is incomplete! 2 files and 4 strings are missing; 1 string is unused."
    )
    assert s(RunStatistics(unused_string_count=1)) == "Localization is inconsistent! 1 string is unused."
    assert s(RunStatistics(unused_string_count=5)) == "Localization is inconsistent! 5 strings are unused."


def test_problem_block_for_present_file():
    lines = reporter.format_problem_block(
        _result(missing=["a"], unused=["x", "y"], base_values={"a": "Apple"}), "en"
    )
    assert lines == [
        f"{FR} (utf-8) has 1 missing and 2 unused strings:",
        '\tMissing: "a" (en: "Apple")',
        '\tExtra (not used): "x"',
        '\tExtra (not used): "y"',
    ]


def test_problem_block_singular_wording():
    lines = reporter.format_problem_block(_result(unused=["x"]), "en")
    assert lines[0] == f"{FR} (utf-8) has 1 unused string:"


def test_problem_block_for_absent_and_unreadable_files():
    absent = reporter.format_problem_block(
        _result(state=FileState.ABSENT, missing=["a", "b"], base_values={"a": "A", "b": "B"}), "en"
    )
    assert absent[0] == f"{FR} is missing altogether; expecting 2 strings:"
    unreadable = reporter.format_problem_block(
        _result(state=FileState.UNREADABLE, missing=["a"], base_values={"a": "A"}), "en"
    )
    assert unreadable[0] == f"{FR} is missing altogether (failed to open file); expecting 1 string:"
    assert unreadable[1] == '\tMissing: "a" (en: "A")'


def test_assessment_header():
    assert (
        reporter.assessment_header(["en", "de", "fr"], 2)
        == "Assessing localizations for 3 languages (en, de, fr) in 2 strings tables..."
    )
    assert (
        reporter.assessment_header(["en"], 1)
        == "Assessing localizations for 1 language (en) in 1 strings table..."
    )


def test_render_text_full(fake_loader):
    loader = fake_loader({EN: {"a": "Apple", "b": "Banana"}, FR: {"a": "Pomme"}})
    report = run_check([FR, EN], "en", loader)
    assert report.status is CheckStatus.INCOMPLETE
    assert reporter.render_text(report) == (
        "Assessing localizations for 2 languages (en, fr) in 1 strings table...\n"
        "\n"
        "1 of 2 strings files appear to be consistent:\n"
        f"{EN} (utf-8) is good.\n"
        "\n"
        f"{FR} (utf-8) has 1 missing string:\n"
        '\tMissing: "b" (en: "Banana")\n'
        "\n"
        "Localization is incomplete! 1 string is missing.\n"
    )


def test_report_to_dict(fake_loader):
    loader = fake_loader({EN: {"a": "Apple"}, FR: {"a": "Pomme", "z": "Zut"}})
    payload = reporter.report_to_dict(run_check([EN, FR], "en", loader))
    assert payload["status"] == "inconsistent"
    assert payload["stats"] == {
        "missing_files": 0,
        "missing_strings": 0,
        "unused_strings": 1,
        "consistent_files": 1,
    }
    fr = [r for r in payload["results"] if r["language"] == "fr"][0]
    assert fr["unused"] == ["z"]
    assert fr["consistent"] is False
