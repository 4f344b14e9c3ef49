from __future__ import annotations

from pathlib import Path

from modscaffold.config import ScaffoldConfig
from modscaffold.scaffold import ActionKind, ScaffoldPlanner, plan


def test_default_plan_targets(default_plan):
    assert default_plan.app_dir == Path("app/src/main/scala/com/github/username/app")
    assert default_plan.lib_dir == Path("lib/src/main/scala/com/github/username/lib")
    assert default_plan.app_file == default_plan.app_dir / "App.scala"
    assert default_plan.lib_file == default_plan.lib_dir / "Lib.scala"


def test_plan_with_custom_base_package_and_file_name():
    config = ScaffoldConfig.from_options(base_package=["org", "example"], app_file_name="Main.ext")
    scaffold_plan = plan(config)
    assert scaffold_plan.app_file.as_posix() == "app/src/main/scala/org/example/app/Main.ext"
    assert scaffold_plan.lib_file.as_posix() == "lib/src/main/scala/org/example/lib/Lib.scala"


def test_plan_is_pure(default_config):
    assert plan(default_config) == plan(default_config)


def test_plan_nests_multi_segment_packages():
    config = ScaffoldConfig.from_options(app_package=["web", "api"], lib_package=["core", "util"])
    scaffold_plan = plan(config)
    assert scaffold_plan.app_dir.parts[-2:] == ("web", "api")
    assert scaffold_plan.lib_dir.parts[-2:] == ("core", "util")


def test_planner_accepts_another_source_root(default_config):
    scaffold_plan = ScaffoldPlanner(source_root=("src", "main", "kotlin")).plan(default_config)
    assert scaffold_plan.app_dir.as_posix() == "app/src/main/kotlin/com/github/username/app"


def test_plan_of_directly_built_config_keeps_whole_segments():
    scaffold_plan = plan(ScaffoldConfig(base_package="com", app_package=["web"]))
    assert scaffold_plan.app_dir.as_posix() == "app/src/main/scala/com/web"


def test_actions_are_ordered_directories_first(default_plan):
    actions = list(default_plan.actions())
    assert [action.kind for action in actions] == [
        ActionKind.CREATE_DIRECTORY,
        ActionKind.CREATE_DIRECTORY,
        ActionKind.CREATE_FILE,
        ActionKind.CREATE_FILE,
    ]
    assert [action.target for action in actions] == [
        default_plan.app_dir,
        default_plan.lib_dir,
        default_plan.app_file,
        default_plan.lib_file,
    ]
    assert [action.label for action in actions] == [
        "app directory",
        "lib directory",
        "app file",
        "lib file",
    ]
