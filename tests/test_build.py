import pytest

from tfproj.build import (
    Layered,
    Project,
    Stack,
    module_boilerplate,
    root_boilerplate,
    touch_file,
    write_module_source,
    write_versions,
)

VERSIONS_TEXT = "terraform {\n  required_providers {}\n  }\n}\n"


def _module_text(name, source):
    return f'module "{name}" {{\n  source = "{source}"\n}}\n'


def _files(root):
    return sorted(
        p.relative_to(root).as_posix() for p in root.rglob("*") if p.is_file()
    )


def test_touch_file_creates_empty(tmp_path):
    target = tmp_path / "a.tf"
    touch_file(target)
    assert target.read_text() == ""


def test_touch_file_keeps_existing_content(tmp_path):
    target = tmp_path / "a.tf"
    target.write_text("keep me")
    touch_file(target)
    assert target.read_text() == "keep me"


def test_write_versions_content(tmp_path):
    target = tmp_path / "versions.tf"
    write_versions(target)
    assert target.read_text() == VERSIONS_TEXT


def test_write_versions_does_not_overwrite(tmp_path):
    target = tmp_path / "versions.tf"
    target.write_text("custom")
    write_versions(target)
    assert target.read_text() == "custom"


def test_write_module_source_content(tmp_path):
    target = tmp_path / "vm.tf"
    write_module_source(target, "vm", "modules/vm")
    assert target.read_text() == _module_text("vm", "modules/vm")


def test_write_module_source_does_not_overwrite(tmp_path):
    target = tmp_path / "vm.tf"
    target.write_text("edited")
    write_module_source(target, "vm", "modules/vm")
    assert target.read_text() == "edited"


def test_module_boilerplate_files(tmp_path):
    module_boilerplate(tmp_path)
    assert _files(tmp_path) == ["main.tf", "outputs.tf", "variables.tf", "versions.tf"]
    assert (tmp_path / "versions.tf").read_text() == VERSIONS_TEXT
    assert (tmp_path / "main.tf").read_text() == ""


def test_root_boilerplate_files(tmp_path):
    root_boilerplate(tmp_path)
    assert _files(tmp_path) == ["outputs.tf", "variables.tf"]


def test_project_is_abstract():
    with pytest.raises(TypeError):
        Project()


def test_stack_with_envs(tmp_path):
    Stack("stack").build(tmp_path, ["vm", "vnet"], ["dev"])
    assert _files(tmp_path) == [
        "envs/dev/outputs.tf",
        "envs/dev/variables.tf",
        "envs/dev/vm.tf",
        "envs/dev/vnet.tf",
        "modules/vm/main.tf",
        "modules/vm/outputs.tf",
        "modules/vm/variables.tf",
        "modules/vm/versions.tf",
        "modules/vnet/main.tf",
        "modules/vnet/outputs.tf",
        "modules/vnet/variables.tf",
        "modules/vnet/versions.tf",
    ]
    assert (tmp_path / "envs/dev/vm.tf").read_text() == _module_text(
        "vm", "../../modules/vm"
    )


def test_stack_without_envs(tmp_path):
    Stack("stack").build(tmp_path, ["vm"], [])
    assert (tmp_path / "vm.tf").read_text() == _module_text("vm", "modules/vm")
    assert (tmp_path / "variables.tf").is_file()
    assert (tmp_path / "outputs.tf").is_file()
    assert not (tmp_path / "envs").exists()


def test_layered_with_envs(tmp_path):
    Layered("layered").build(tmp_path, ["vm"], ["dev", "prod"])
    for env in ("dev", "prod"):
        env_dir = tmp_path / "envs" / env / "vm"
        assert sorted(p.name for p in env_dir.iterdir()) == [
            "main.tf",
            "outputs.tf",
            "variables.tf",
        ]
        assert (env_dir / "main.tf").read_text() == _module_text(
            "vm", "../../../modules/vm"
        )
    assert (tmp_path / "modules/vm/versions.tf").read_text() == VERSIONS_TEXT


def test_layered_without_envs(tmp_path):
    Layered("layered").build(tmp_path, ["vnet"], [])
    layer = tmp_path / "vnet"
    assert (layer / "main.tf").read_text() == _module_text("vnet", "../modules/vnet")
    assert sorted(p.name for p in layer.iterdir()) == [
        "main.tf",
        "outputs.tf",
        "variables.tf",
    ]


def test_build_is_idempotent_and_preserves_edits(tmp_path):
    Stack("stack").build(tmp_path, ["vm"], ["dev"])
    edited = tmp_path / "modules/vm/main.tf"
    edited.write_text("resource {}")
    before = _files(tmp_path)
    Stack("stack").build(tmp_path, ["vm"], ["dev"])
    assert _files(tmp_path) == before
    assert edited.read_text() == "resource {}"


def test_build_fails_when_root_is_a_file(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("")
    with pytest.raises(OSError):
        Layered("layered").build(blocker, ["vm"], [])