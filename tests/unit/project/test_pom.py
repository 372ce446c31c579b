"""Tests for the pom.xml-backed project model.

Tests:
- defaults and declared build directories
- properties: interpolation, parent inheritance, user overrides
- plugins: configuration tree, pluginManagement merge, parent inheritance and merge
- classpath file reading
- reactor loading: module order, broken modules, missing root
"""

import os
from pathlib import Path

import pytest

from inspector.errors import DependencyResolutionFailure, ProjectLoadError
from inspector.module_inspector import ModuleInspector
from project.pom import PomProject, load_reactor
from tests.factories import write_pom

COMPILER_PLUGIN = """
<build><plugins><plugin>
  <groupId>org.apache.maven.plugins</groupId>
  <artifactId>maven-compiler-plugin</artifactId>
  <configuration><source>{source}</source><target>{source}</target></configuration>
</plugin></plugins></build>
"""


class TestDirectories:
    """Build directories with Maven defaults."""

    def test_defaults(self, tmp_path: Path) -> None:
        project = PomProject(write_pom(tmp_path, ""))

        assert project.base_directory == str(tmp_path)
        assert project.source_directory == str(tmp_path / "src" / "main" / "java")
        assert project.test_source_directory == str(tmp_path / "src" / "test" / "java")
        assert project.build_directory == str(tmp_path / "target")
        assert project.output_directory == str(tmp_path / "target" / "classes")
        assert project.test_output_directory == str(tmp_path / "target" / "test-classes")

    def test_declared_directories(self, tmp_path: Path) -> None:
        body = (
            "<build>"
            "<directory>out</directory>"
            "<sourceDirectory>src</sourceDirectory>"
            "<testSourceDirectory>${project.basedir}/test</testSourceDirectory>"
            "<outputDirectory>${project.build.directory}/bin</outputDirectory>"
            "</build>"
        )
        project = PomProject(write_pom(tmp_path, body))

        assert project.build_directory == str(tmp_path / "out")
        assert project.source_directory == str(tmp_path / "src")
        assert project.test_source_directory == str(tmp_path / "test")
        assert project.output_directory == str(tmp_path / "out" / "bin")
        assert project.test_output_directory == str(tmp_path / "out" / "test-classes")


class TestProperties:
    """Property lookup."""

    def test_declared_and_interpolated(self, tmp_path: Path) -> None:
        body = (
            "<properties>"
            "<jdk>11</jdk>"
            "<maven.compiler.source>${jdk}</maven.compiler.source>"
            "</properties>"
        )
        project = PomProject(write_pom(tmp_path, body))

        assert project.get_property("maven.compiler.source") == "11"
        assert project.get_property("java.version") is None

    def test_unresolvable_stays_literal(self, tmp_path: Path) -> None:
        body = "<properties><maven.compiler.source>${nope}</maven.compiler.source></properties>"
        project = PomProject(write_pom(tmp_path, body))

        assert project.get_property("maven.compiler.source") == "${nope}"

    def test_user_properties_override(self, tmp_path: Path) -> None:
        body = "<properties><java.version>1.8</java.version></properties>"
        project = PomProject(write_pom(tmp_path, body), user_properties={"java.version": "17"})

        assert project.get_property("java.version") == "17"

    def test_inherited_from_parent(self, tmp_path: Path) -> None:
        parent = PomProject(
            write_pom(tmp_path, "<properties><java.version>1.8</java.version></properties>", artifact_id="parent")
        )
        child = PomProject(write_pom(tmp_path / "lib", "", artifact_id="lib", parent="parent"), parent=parent)

        assert child.get_property("java.version") == "1.8"
        assert child.get_property("project.basedir") == str(tmp_path / "lib")

    def test_not_inherited_without_parent_declaration(self, tmp_path: Path) -> None:
        parent = PomProject(
            write_pom(tmp_path, "<properties><java.version>1.8</java.version></properties>", artifact_id="parent")
        )
        child = PomProject(write_pom(tmp_path / "lib", "", artifact_id="lib"), parent=parent)

        assert child.get_property("java.version") is None

    def test_name_falls_back_to_artifact_id(self, tmp_path: Path) -> None:
        assert PomProject(write_pom(tmp_path, "", artifact_id="core")).name == "core"
        assert PomProject(write_pom(tmp_path / "n", "<name>Core Lib</name>", artifact_id="core")).name == "Core Lib"


class TestPlugins:
    """Build plugins and their configuration."""

    def test_configuration_tree(self, tmp_path: Path) -> None:
        project = PomProject(write_pom(tmp_path, COMPILER_PLUGIN.format(source="1.8")))

        (plugin,) = project.build_plugins
        assert plugin.artifact_id == "maven-compiler-plugin"
        assert plugin.configuration.get_child("source").value == "1.8"
        assert plugin.configuration.get_child("release") is None

    def test_configuration_interpolated(self, tmp_path: Path) -> None:
        body = "<properties><jdk>1.7</jdk></properties>" + COMPILER_PLUGIN.format(source="${jdk}")
        project = PomProject(write_pom(tmp_path, body))

        assert project.build_plugins[0].configuration.get_child("source").value == "1.7"

    def test_plugin_management_merged(self, tmp_path: Path) -> None:
        body = (
            "<build><pluginManagement><plugins><plugin>"
            "<artifactId>maven-compiler-plugin</artifactId>"
            "<configuration><source>1.6</source><encoding>UTF-8</encoding></configuration>"
            "</plugin></plugins></pluginManagement>"
            "<plugins><plugin><artifactId>maven-compiler-plugin</artifactId></plugin></plugins></build>"
        )
        project = PomProject(write_pom(tmp_path, body))

        configuration = project.build_plugins[0].configuration
        assert configuration.get_child("source").value == "1.6"
        assert configuration.get_child("encoding").value == "UTF-8"

    def test_parent_plugins_inherited(self, tmp_path: Path) -> None:
        parent = PomProject(write_pom(tmp_path, COMPILER_PLUGIN.format(source="1.8"), artifact_id="parent"))
        child = PomProject(write_pom(tmp_path / "lib", "", artifact_id="lib", parent="parent"), parent=parent)

        assert [p.artifact_id for p in child.build_plugins] == ["maven-compiler-plugin"]

    def test_redeclared_plugin_merges_with_parent(self, tmp_path: Path) -> None:
        """Child overrides by element name; the parent's other settings survive."""
        parent = PomProject(write_pom(tmp_path, COMPILER_PLUGIN.format(source="1.8"), artifact_id="parent"))
        body = (
            "<build><plugins><plugin>"
            "<artifactId>maven-compiler-plugin</artifactId>"
            "<configuration><encoding>UTF-8</encoding><target>11</target></configuration>"
            "</plugin></plugins></build>"
        )
        child = PomProject(write_pom(tmp_path / "lib", body, artifact_id="lib", parent="parent"), parent=parent)

        (plugin,) = child.build_plugins
        assert plugin.configuration.get_child("source").value == "1.8"
        assert plugin.configuration.get_child("target").value == "11"
        assert plugin.configuration.get_child("encoding").value == "UTF-8"
        assert ModuleInspector().compliance_level(child) == 8

    def test_managed_compiler_plugin_applies_without_declaration(self, tmp_path: Path) -> None:
        body = (
            "<build><pluginManagement><plugins><plugin>"
            "<artifactId>maven-compiler-plugin</artifactId>"
            "<configuration><source>1.8</source></configuration>"
            "</plugin><plugin>"
            "<artifactId>maven-jar-plugin</artifactId>"
            "<configuration><skipIfEmpty>true</skipIfEmpty></configuration>"
            "</plugin></plugins></pluginManagement></build>"
        )
        project = PomProject(write_pom(tmp_path, body))

        assert [p.artifact_id for p in project.build_plugins] == ["maven-compiler-plugin"]
        assert ModuleInspector().compliance_level(project) == 8

    def test_managed_compiler_plugin_from_parent(self, tmp_path: Path) -> None:
        body = (
            "<build><pluginManagement><plugins><plugin>"
            "<artifactId>maven-compiler-plugin</artifactId>"
            "<configuration><source>1.8</source></configuration>"
            "</plugin></plugins></pluginManagement></build>"
        )
        parent = PomProject(write_pom(tmp_path, body, artifact_id="parent"))
        child = PomProject(write_pom(tmp_path / "lib", "", artifact_id="lib", parent="parent"), parent=parent)

        assert ModuleInspector().compliance_level(child) == 8


class TestClasspath:
    """Resolved test classpath from the dependency plugin output."""

    def test_outputs_then_entries(self, tmp_path: Path) -> None:
        project = PomProject(write_pom(tmp_path, ""))
        target = tmp_path / "target"
        target.mkdir()
        (target / "classpath.txt").write_text(
            os.pathsep.join(["/repo/junit.jar", "/repo/hamcrest.jar"]) + "\n", encoding="utf-8"
        )

        assert project.test_classpath_elements() == [
            str(target / "test-classes"),
            str(target / "classes"),
            "/repo/junit.jar",
            "/repo/hamcrest.jar",
        ]

    def test_custom_file_name(self, tmp_path: Path) -> None:
        project = PomProject(write_pom(tmp_path, ""), classpath_file="cp.txt")
        (tmp_path / "target").mkdir()
        (tmp_path / "target" / "cp.txt").write_text("/repo/a.jar", encoding="utf-8")

        assert project.test_classpath_elements()[-1] == "/repo/a.jar"

    def test_missing_file(self, tmp_path: Path) -> None:
        project = PomProject(write_pom(tmp_path, ""))

        with pytest.raises(DependencyResolutionFailure):
            project.test_classpath_elements()


class TestLoadReactor:
    """load_reactor."""

    def test_modules_depth_first(self, tmp_path: Path) -> None:
        write_pom(tmp_path, "<modules><module>core</module><module>app</module></modules>", artifact_id="parent")
        write_pom(tmp_path / "core", "<modules><module>api</module></modules>", artifact_id="core", parent="parent")
        write_pom(tmp_path / "core" / "api", "", artifact_id="api", parent="core")
        write_pom(tmp_path / "app", "", artifact_id="app", parent="parent")

        root, modules = load_reactor(tmp_path)

        assert root.artifact_id == "parent"
        assert [m.artifact_id for m in modules] == ["parent", "core", "api", "app"]
        assert modules[0] is root

    def test_broken_module_skipped(self, tmp_path: Path) -> None:
        write_pom(tmp_path, "<modules><module>missing</module><module>ok</module></modules>", artifact_id="parent")
        write_pom(tmp_path / "ok", "", artifact_id="ok", parent="parent")

        _, modules = load_reactor(tmp_path)

        assert [m.artifact_id for m in modules] == ["parent", "ok"]

    def test_pom_file_argument(self, tmp_path: Path) -> None:
        pom = write_pom(tmp_path, "", artifact_id="solo")

        root, modules = load_reactor(pom)

        assert [m.artifact_id for m in modules] == ["solo"]

    def test_missing_root(self, tmp_path: Path) -> None:
        with pytest.raises(ProjectLoadError):
            load_reactor(tmp_path)

    def test_malformed_root(self, tmp_path: Path) -> None:
        (tmp_path / "pom.xml").write_text("<project>", encoding="utf-8")

        with pytest.raises(ProjectLoadError):
            load_reactor(tmp_path)
