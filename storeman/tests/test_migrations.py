"""Tests that the shipped migrations match the models."""

from io import StringIO

import pytest
from django.core.management import call_command
from django.test import override_settings


pytestmark = pytest.mark.django_db


class TestMigrations:
    @override_settings(MIGRATION_MODULES={})
    def test_no_missing_migrations(self):
        # The suite runs with --nomigrations; re-enable the real modules here.
        out = StringIO()
        try:
            call_command("makemigrations", "storeman", "--check", "--dry-run", stdout=out)
        except SystemExit:
            pytest.fail(f"Models have changes not reflected in migrations:\n{out.getvalue()}")
