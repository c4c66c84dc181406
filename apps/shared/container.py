from collections.abc import Callable

from apps.events.dal.access_dal import EventAccessDAL
from apps.events.dal.event_dal import EventDAL
from apps.events.services.access_service import EventAccessService


class Container:
    """
    Simple DI Container for managing service dependencies.

    Views ask the container for services; tests override the factories to
    run the same views against fakes.
    """

    def __init__(self):
        self._dal_factories = {}
        self._service_factories = {}

        self._setup_default_factories()

    def _setup_default_factories(self):
        """Set up default factory functions for services"""
        self._dal_factories = {
            'access_store': EventAccessDAL,
            'event_dal': EventDAL,
        }

        self._service_factories = {
            'access_service': EventAccessService,
        }

    def access_service(self) -> EventAccessService:
        """Create EventAccessService with its store injected"""
        return self._service_factories['access_service'](store=self._dal_factories['access_store']())

    def event_dal(self) -> EventDAL:
        return self._dal_factories['event_dal']()

    # Override methods for testing
    def override_access_store(self, factory: Callable):
        """Override the access store factory for testing"""
        self._dal_factories['access_store'] = factory

    def override_event_dal(self, factory: Callable):
        """Override EventDAL factory for testing"""
        self._dal_factories['event_dal'] = factory

    def reset_to_defaults(self):
        """Reset all factories to defaults - useful for test cleanup"""
        self._setup_default_factories()


# Global container instance
_container = Container()


def get_container() -> Container:
    """Get the global container instance"""
    return _container


def get_access_service() -> EventAccessService:
    """Quick access to EventAccessService"""
    return get_container().access_service()


def get_event_dal() -> EventDAL:
    return get_container().event_dal()
