from .sync_coordinator import SyncCoordinator
