# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the verification harness."""

from __future__ import annotations

import pytest

from lintpresets import layers
from lintpresets.composer import compose
from lintpresets.diagnostics import rule_ids
from lintpresets.errors import ConfigurationError
from lintpresets.fragment import Fragment, LanguageOptions, PluginHandle
from lintpresets.harness import (
    SANITIZER_FRAGMENT_NAME,
    TYPE_AWARE_RULES,
    check_filename,
    disabled_rules,
    sanitize,
    verify,
    verify_many,
)

from conftest import ScriptedEngine

_UNSORTED = 'import { z } from "zod"\nimport { a } from "alpha"\n'
_SORTED = 'import { a } from "alpha"\nimport { z } from "zod"\n'


def test_unsorted_imports_flagged_under_base(engine: ScriptedEngine) -> None:
    messages = verify(_UNSORTED, layers.base(), engine=engine)

    assert "simple-import-sort/imports" in rule_ids(messages)


def test_sorted_imports_pass_under_base(engine: ScriptedEngine) -> None:
    messages = verify(_SORTED, layers.base(), engine=engine)

    assert "simple-import-sort/imports" not in rule_ids(messages)


def test_functional_layers_still_sort_imports(engine: ScriptedEngine) -> None:
    for config in (layers.functional(), layers.functional_library()):
        assert "simple-import-sort/imports" in rule_ids(verify(_UNSORTED, config, engine=engine))


def test_let_flagged_under_functional(engine: ScriptedEngine) -> None:
    messages = verify("let x = 1\nconsole.log(x)\n", layers.functional(), engine=engine)

    assert "functional/no-let" in rule_ids(messages)


def test_const_allowed_under_functional(engine: ScriptedEngine) -> None:
    messages = verify("const x = 1\nconsole.log(x)\n", layers.functional(), engine=engine)

    assert "functional/no-let" not in rule_ids(messages)


def test_let_not_flagged_under_base(engine: ScriptedEngine) -> None:
    messages = verify("let x = 1\nconsole.log(x)\n", layers.base(), engine=engine)

    assert "functional/no-let" not in rule_ids(messages)


def test_let_flagged_under_functional_library(engine: ScriptedEngine) -> None:
    messages = verify("let x = 1\nconsole.log(x)\n", layers.functional_library(), engine=engine)

    assert "functional/no-let" in rule_ids(messages)


def test_unparsable_source_yields_single_fatal_diagnostic(engine: ScriptedEngine) -> None:
    messages = verify("const broken = {\n", layers.base(), engine=engine)

    assert len(messages) == 1
    assert messages[0].fatal is True
    assert messages[0].rule_id is None


@pytest.mark.parametrize("filename", ["snippet.py", "README", "styles.css"])
def test_unrecognized_extension_raises(engine: ScriptedEngine, filename: str) -> None:
    with pytest.raises(ConfigurationError, match="unrecognized extension"):
        verify("const x = 1\n", layers.base(), filename, engine=engine)
    assert engine.calls == []


@pytest.mark.parametrize("filename", ["a.ts", "b.tsx", "c.mjs", "dir/d.cts", "E.JS"])
def test_recognized_extensions(filename: str) -> None:
    assert check_filename(filename) == filename


def test_sanitize_strips_type_information_and_disables_type_aware_rules() -> None:
    original = layers.functional_library()

    sanitized = sanitize(original)

    assert "projectService" not in sanitized.language_options.parser_options
    assert all(
        "projectService" not in fragment.language_options.parser_options
        for fragment in sanitized.fragments
        if fragment.language_options is not None
    )
    assert sanitized.fragments[-1].name == SANITIZER_FRAGMENT_NAME
    for rule_id in TYPE_AWARE_RULES:
        assert not sanitized.rules[rule_id].enabled
    assert original.language_options.parser_options["projectService"] is True
    assert original.rules["@typescript-eslint/no-floating-promises"].enabled


def test_sanitize_keeps_other_parser_options() -> None:
    config = compose(
        [
            Fragment(
                name="typed",
                language_options=LanguageOptions(
                    parser_options={"project": "./tsconfig.json", "ecmaFeatures": {"jsx": True}},
                ),
            ),
        ],
    )

    sanitized = sanitize(config)

    assert dict(sanitized.language_options.parser_options) == {"ecmaFeatures": {"jsx": True}}


def test_plugin_declared_type_aware_rules_are_disabled() -> None:
    config = compose(
        [
            Fragment(
                name="demo",
                plugins={"demo": PluginHandle.of("eslint-plugin-demo", type_aware_rules=("demo/typed",))},
                rules={"demo/typed": "error", "demo/plain": "error"},
            ),
        ],
    )

    sanitized = sanitize(config)

    assert "demo/typed" in disabled_rules(config)
    assert not sanitized.rules["demo/typed"].enabled
    assert sanitized.rules["demo/plain"].enabled


def test_type_aware_rules_never_reported(engine: ScriptedEngine) -> None:
    forced = sorted(disabled_rules(layers.functional_library()))
    source = "".join(f"// trigger: {rule_id}\n" for rule_id in forced)
    source += "// trigger: functional/no-loop-statements\n"

    for config in (layers.base(), layers.functional(), layers.functional_library()):
        reported = set(rule_ids(verify(source, config, engine=engine)))
        assert reported.isdisjoint(forced)

    assert "functional/no-loop-statements" in reported
    unsanitized = engine.analyze(source, layers.functional_library(), "test.ts")
    assert "@typescript-eslint/no-floating-promises" in rule_ids(list(unsanitized))


def test_engine_receives_sanitized_configuration(engine: ScriptedEngine) -> None:
    verify("const x = 1\n", layers.functional(), "module.mts", engine=engine)

    (_, received, filename), = engine.calls
    assert filename == "module.mts"
    assert "projectService" not in received.language_options.parser_options


def test_verify_many_isolates_fatal_snippets(engine: ScriptedEngine) -> None:
    results = verify_many(
        [
            ("let x = 1\n", "one.ts"),
            ("const broken = (\n", "two.ts"),
            (_UNSORTED, "three.ts"),
        ],
        layers.functional(),
        engine=engine,
    )

    assert rule_ids(results[0]) == ["functional/no-let"]
    assert [message.fatal for message in results[1]] == [True]
    assert "simple-import-sort/imports" in rule_ids(results[2])


def test_verify_many_validates_filenames_first(engine: ScriptedEngine) -> None:
    with pytest.raises(ConfigurationError):
        verify_many([("const x = 1\n", "ok.ts"), ("x = 1\n", "bad.py")], layers.base(), engine=engine)
    assert engine.calls == []
