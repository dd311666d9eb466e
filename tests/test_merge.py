"""Tests for merging: whole documents, hook definitions, task maps, job lists."""

import copy

import yaml

from lhm.hooks import (
    merge_documents,
    merge_hook_definition,
    merge_job_lists,
    merge_task_maps,
    strip_task_names,
    task_names,
)


def y(text: str):
    return yaml.safe_load(text)


class TestMergeDocuments:
    def test_empty_overlay_is_identity(self):
        global_doc = y(
            "output:\n  - success\npre-push:\n  commands:\n    test:\n      run: just test\n"
        )
        assert merge_documents(global_doc, {}) == global_doc

    def test_overlay_overrides_scalars(self):
        global_doc = y("output:\n  - success\nmin_version: '1.0'\n")
        overlay = y("output:\n  - failure\nskip_lfs: true\n")
        merged = merge_documents(global_doc, overlay)
        assert merged == {"output": ["failure"], "min_version": "1.0", "skip_lfs": True}

    def test_global_only_hook_preserved(self):
        global_doc = y(
            "prepare-commit-msg:\n  commands:\n    aittributor:\n      run: aittributor\n"
        )
        overlay = y("pre-commit:\n  jobs:\n    - name: fmt\n      run: just fmt\n")
        merged = merge_documents(global_doc, overlay)
        assert merged["prepare-commit-msg"]["commands"]["aittributor"]["run"] == "aittributor"
        assert merged["pre-commit"] == {"jobs": [{"name": "fmt", "run": "just fmt"}]}

    def test_non_hook_mapping_replaced_not_merged(self):
        global_doc = {"colors": {"red": 1, "blue": 2}}
        overlay = {"colors": {"red": 9}}
        assert merge_documents(global_doc, overlay) == {"colors": {"red": 9}}

    def test_key_order_preserved(self):
        global_doc = {"output": ["success"], "pre-push": {"commands": {"a": {"run": "a"}}}}
        overlay = {"skip_lfs": True, "pre-push": {"commands": {"b": {"run": "b"}}}}
        merged = merge_documents(global_doc, overlay)
        assert list(merged) == ["output", "pre-push", "skip_lfs"]
        assert list(merged["pre-push"]["commands"]) == ["a", "b"]

    def test_inputs_not_mutated(self):
        global_doc = y(
            "pre-push:\n  commands:\n    test:\n      run: T1\n    lint:\n      run: L1\n"
        )
        overlay = y("pre-push:\n  jobs:\n    - name: test\n      run: T2\n")
        g_before, o_before = copy.deepcopy(global_doc), copy.deepcopy(overlay)
        merge_documents(global_doc, overlay)
        assert global_doc == g_before
        assert overlay == o_before

    def test_non_mapping_overlay_wins(self):
        assert merge_documents({"a": 1}, ["x"]) == ["x"]

    def test_end_to_end_cross_format(self):
        global_doc = y(
            "pre-push:\n  commands:\n    test:\n      run: T1\n    lint:\n      run: L1\n"
        )
        overlay = y("pre-push:\n  jobs:\n    - name: test\n      run: T2\n")
        merged = merge_documents(global_doc, overlay)
        assert merged["pre-push"] == {
            "commands": {"lint": {"run": "L1"}},
            "jobs": [{"name": "test", "run": "T2"}],
        }

    def test_real_configs(self):
        global_doc = y(
            """
output:
  - success
  - failure
pre-push:
  parallel: true
  commands:
    test:
      run: grep -qe ^test Justfile 2> /dev/null && just test
    lint:
      run: grep -qe ^lint Justfile 2> /dev/null && just lint
prepare-commit-msg:
  commands:
    aittributor:
      run: aittributor {1}
pre-commit:
  commands:
    fmt:
      run: grep -qe ^fmt Justfile 2> /dev/null && just fmt
"""
        )
        overlay = y(
            """
skip_lfs: true
pre-commit:
  parallel: true
  jobs:
    - name: fmt
      run: just fmt
pre-push:
  jobs:
    - name: lint
      run: just lint
    - name: test
      run: just test
"""
        )
        merged = merge_documents(global_doc, overlay)
        out = yaml.safe_dump(merged)

        assert merged["skip_lfs"] is True
        assert "aittributor" in out
        assert "grep -qe" not in out
        assert merged["pre-commit"] == {
            "parallel": True,
            "jobs": [{"name": "fmt", "run": "just fmt"}],
        }
        assert merged["pre-push"]["parallel"] is True
        assert [j["name"] for j in merged["pre-push"]["jobs"]] == ["lint", "test"]
        assert "commands" not in merged["pre-push"]


class TestMergeHookDefinition:
    def test_commands_dedup_by_name(self):
        merged = merge_hook_definition(
            {"commands": {"test": {"run": "global-test"}, "lint": {"run": "global-lint"}}},
            {"commands": {"test": {"run": "repo-test"}}},
        )
        assert merged["commands"] == {
            "test": {"run": "repo-test"},
            "lint": {"run": "global-lint"},
        }

    def test_cross_format_commands_shadowed_by_jobs(self):
        merged = merge_hook_definition(
            {"commands": {"test": {"run": "A"}}},
            {"jobs": [{"name": "test", "run": "B"}]},
        )
        assert "commands" not in merged
        assert merged["jobs"] == [{"name": "test", "run": "B"}]

    def test_cross_format_jobs_shadowed_by_scripts(self):
        merged = merge_hook_definition(
            {"jobs": [{"name": "build.sh", "run": "old"}, {"run": "unnamed"}]},
            {"scripts": {"build.sh": {"runner": "bash"}}},
        )
        assert merged["jobs"] == [{"run": "unnamed"}]
        assert merged["scripts"] == {"build.sh": {"runner": "bash"}}

    def test_cross_format_scripts_shadowed_by_commands(self):
        merged = merge_hook_definition(
            {"scripts": {"x": {"runner": "sh"}, "y": {"runner": "sh"}}},
            {"commands": {"x": {"run": "echo x"}}},
        )
        assert merged == {
            "scripts": {"y": {"runner": "sh"}},
            "commands": {"x": {"run": "echo x"}},
        }

    def test_identity_resolves_once(self):
        merged = merge_hook_definition(
            {
                "commands": {"fmt": {"run": "c"}},
                "scripts": {"fmt": {"runner": "s"}},
                "jobs": [{"name": "fmt", "run": "j"}],
            },
            {"jobs": [{"name": "fmt", "run": "overlay"}]},
        )
        assert merged == {"jobs": [{"name": "fmt", "run": "overlay"}]}

    def test_scalar_settings_overlay_wins(self):
        merged = merge_hook_definition(
            {"parallel": True, "piped": False, "commands": {"a": {"run": "a"}}},
            {"parallel": False},
        )
        assert merged == {"parallel": False, "piped": False, "commands": {"a": {"run": "a"}}}

    def test_overlay_without_names_keeps_everything(self):
        merged = merge_hook_definition(
            {"commands": {"a": {"run": "a"}}},
            {"jobs": [{"run": "unnamed"}]},
        )
        assert merged == {"commands": {"a": {"run": "a"}}, "jobs": [{"run": "unnamed"}]}


class TestStripTaskNames:
    def test_drops_emptied_containers(self):
        hook = {"commands": {"a": {}}, "jobs": [{"name": "a"}], "parallel": True}
        assert strip_task_names(hook, {"a"}) == {"parallel": True}

    def test_unnamed_jobs_survive(self):
        hook = {"jobs": [{"run": "x"}, {"name": "a", "run": "y"}]}
        assert strip_task_names(hook, {"a"}) == {"jobs": [{"run": "x"}]}


class TestTaskNames:
    def test_collects_all_formats(self):
        hook = {
            "commands": {"a": {}},
            "scripts": {"b.sh": {}},
            "jobs": [{"name": "c"}, {"run": "unnamed"}],
        }
        assert task_names(hook) == {"a", "b.sh", "c"}

    def test_non_mapping(self):
        assert task_names(None) == set()


class TestMergeTaskMaps:
    def test_overlay_inserts_and_overwrites(self):
        merged = merge_task_maps(
            {"a": {"run": "1"}, "b": {"run": "2"}}, {"b": {"run": "3"}, "c": {"run": "4"}}
        )
        assert merged == {"a": {"run": "1"}, "b": {"run": "3"}, "c": {"run": "4"}}


class TestMergeJobLists:
    def test_named_dedup(self):
        merged = merge_job_lists(
            [{"name": "test", "run": "global-test"}, {"name": "unique", "run": "global-unique"}],
            [{"name": "test", "run": "repo-test"}],
        )
        assert merged == [
            {"name": "unique", "run": "global-unique"},
            {"name": "test", "run": "repo-test"},
        ]

    def test_unnamed_appended_in_order(self):
        assert merge_job_lists([{"run": "g1"}], [{"run": "o1"}]) == [{"run": "g1"}, {"run": "o1"}]

    def test_global_order_preserved(self):
        merged = merge_job_lists(
            [{"name": "a"}, {"run": "x"}, {"name": "b"}, {"name": "c"}],
            [{"name": "b", "run": "new"}],
        )
        assert merged == [{"name": "a"}, {"run": "x"}, {"name": "c"}, {"name": "b", "run": "new"}]

    def test_non_list_overlay_wins(self):
        assert merge_job_lists([{"name": "a"}], {"oops": True}) == {"oops": True}
