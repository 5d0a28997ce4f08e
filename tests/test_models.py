"""Tests for the data models."""

import dataclasses

import pytest

from conftest import make_metadata
from repocard.models import CommitRecord, ExportOptions, ExportResult, RepositoryMetadata


class TestRepositoryMetadata:
    def test_from_api(self, repo_payload):
        meta = RepositoryMetadata.from_api(repo_payload)
        assert meta.name == "widget"
        assert meta.description == "Widgets & gadgets"
        assert meta.forks_count == 12
        assert meta.language == "Python"
        assert meta.license.name == "Apache License 2.0"
        assert meta.owner.html_url == "https://github.com/acme"
        assert meta.pushed_at == "2024-05-19T22:00:00Z"

    def test_from_api_optional_fields(self, repo_payload):
        repo_payload.update(description=None, language=None, license=None)
        del repo_payload["topics"]
        meta = RepositoryMetadata.from_api(repo_payload)
        assert meta.description is None
        assert meta.language is None
        assert meta.license is None
        assert meta.topics == ()

    def test_license_without_spdx(self, repo_payload):
        repo_payload["license"] = {"key": "other", "name": "Other", "spdx_id": None}
        assert RepositoryMetadata.from_api(repo_payload).license.spdx_id is None

    def test_updated_date(self):
        assert make_metadata(updated_at="2024-06-01T12:34:56Z").updated_date == "2024-06-01"

    def test_frozen(self, sample_metadata):
        with pytest.raises(dataclasses.FrozenInstanceError):
            sample_metadata.stargazers_count = 0


class TestCommitRecord:
    def test_from_api_shortens_sha_and_message(self, commit_payload):
        record = CommitRecord.from_api(commit_payload)
        assert record.sha == "0123456"
        assert record.message == "feat: add gradient card"
        assert record.author_name == "Ada"
        assert record.date == "2024-05-19T22:00:00Z"

    def test_from_api_empty_message(self, commit_payload):
        commit_payload["commit"]["message"] = ""
        assert CommitRecord.from_api(commit_payload).message == ""


class TestExportModels:
    def test_options_defaults(self):
        opts = ExportOptions(output_dir="/tmp/out")
        assert opts.include_attribution is True
        assert opts.template_id == "modern"
        assert opts.primary_color is None
        assert opts.png_width == 1200

    def test_result_constructors(self):
        ok = ExportResult.ok("/out/share-kit", ["a", "b"])
        assert ok.success and ok.files == ("a", "b") and ok.error is None

        failed = ExportResult.failed("/out/share-kit", ["a"], "boom")
        assert not failed.success
        assert failed.error == "boom"

    def test_result_to_dict(self):
        data = ExportResult.failed("/out", ("a",), "boom").to_dict()
        assert data == {"success": False, "output_path": "/out", "files": ["a"], "error": "boom"}
