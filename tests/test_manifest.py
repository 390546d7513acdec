"""
Test cases for unpinning dependency peer dependencies.
"""
import json

import pytest

from app_scripts.core.errors import FileOperationError
from app_scripts.services.manifest import unpin_dependency


def _write_manifest(project_dir, package, data):
    manifest = project_dir / 'node_modules' / package / 'package.json'
    manifest.parent.mkdir(parents=True)
    manifest.write_text(json.dumps(data))
    return manifest


class TestUnpinDependency:
    """Test manifest patching."""

    def test_clears_peer_dependencies(self, tmp_path):
        """Test that peerDependencies becomes empty and other fields are kept."""
        original = {
            'name': 'ionic-angular',
            'version': '3.9.2',
            'peerDependencies': {'@angular/core': '5.0.3', 'rxjs': '5.5.2'},
            'dependencies': {},
            'keywords': ['ionic', 'angular'],
        }
        manifest = _write_manifest(tmp_path, 'ionic-angular', original)

        result = unpin_dependency(tmp_path, 'ionic-angular')

        data = json.loads(manifest.read_text())
        assert result == manifest
        assert data['peerDependencies'] == {}
        assert {k: v for k, v in data.items() if k != 'peerDependencies'} == \
            {k: v for k, v in original.items() if k != 'peerDependencies'}
        assert list(data) == list(original)

    def test_pretty_printed(self, tmp_path):
        manifest = _write_manifest(tmp_path, 'pkg', {'name': 'pkg', 'peerDependencies': {'a': '1'}})

        unpin_dependency(tmp_path, 'pkg')

        assert manifest.read_text() == '{\n  "name": "pkg",\n  "peerDependencies": {}\n}'

    def test_adds_field_when_absent(self, tmp_path):
        manifest = _write_manifest(tmp_path, 'pkg', {'name': 'pkg'})

        unpin_dependency(tmp_path, 'pkg')

        assert json.loads(manifest.read_text())['peerDependencies'] == {}

    def test_missing_package(self, tmp_path):
        with pytest.raises(FileOperationError) as exc_info:
            unpin_dependency(tmp_path, 'ionic-angular')

        assert exc_info.value.message.startswith('Error with ionic-angular package')

    def test_invalid_manifest(self, tmp_path):
        manifest = tmp_path / 'node_modules' / 'pkg' / 'package.json'
        manifest.parent.mkdir(parents=True)
        manifest.write_text('[1, 2')

        with pytest.raises(FileOperationError):
            unpin_dependency(tmp_path, 'pkg')

    def test_non_object_manifest(self, tmp_path):
        manifest = tmp_path / 'node_modules' / 'pkg' / 'package.json'
        manifest.parent.mkdir(parents=True)
        manifest.write_text('[]')

        with pytest.raises(FileOperationError):
            unpin_dependency(tmp_path, 'pkg')
