"""Drive discovery."""
from ejectd.discovery.catalog import DriveCatalog
from ejectd.discovery.root import RootDeviceResolver

__all__ = ['DriveCatalog', 'RootDeviceResolver']
