"""Verify all modules can be imported without errors."""
import pytest

# All tests in this module are pure import checks - mark as unit tests
pytestmark = pytest.mark.unit


def test_domain_imports():
    """Import domain models."""
    import domain.models.base
    import domain.models.exercise
    import domain.models.logged_workout
    import domain.models.set_detail
    import domain.models.snapshot
    import domain.models.template
    import domain.models.user


def test_application_imports():
    """Import ports, services and use cases."""
    import application.exceptions
    import application.ports.data_store
    import application.ports.import_source
    import application.ports.session_marker_store
    import application.services.access_guard
    import application.services.data_interchange
    import application.services.session_manager
    import application.use_cases.export_user_data
    import application.use_cases.import_user_data


def test_infrastructure_imports():
    """Import adapters."""
    import infrastructure.files.import_sources
    import infrastructure.memory.data_store
    import infrastructure.session.marker_store


def test_backend_and_api_imports():
    """Import composition root and routers."""
    import api.deps
    import api.routers.data
    import api.routers.health
    import api.routers.logged_workouts
    import api.routers.session
    import api.routers.templates
    import backend.container
    import backend.main
    import backend.settings
