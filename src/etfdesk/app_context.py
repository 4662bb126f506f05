"""Application context for in-process service management.

Provides a centralized way to access all services without HTTP,
for scripts and notebooks that drive the backend directly.
"""

from pathlib import Path
from typing import Optional

from etfdesk.config.settings import Settings, set_settings, get_settings
from etfdesk.repositories.sqlalchemy.database import (
    init_db_with_path,
    reset_database,
    get_session,
)
from etfdesk.repositories.sqlalchemy import SqlAlchemyKeyValueRepository
from etfdesk.services import (
    MarketDataService,
    AnalysisService,
    UiStateService,
)


class AppContext:
    """
    Application context providing in-process access to all services.

    The market data gateway is kept for the lifetime of the context so its
    response cache is shared across calls.
    """

    def __init__(self, data_dir: Optional[Path] = None):
        """
        Initialize application context.

        Args:
            data_dir: Optional data directory. If not provided, uses default.
        """
        self._data_dir = data_dir
        self._session = None
        self._initialized = False

        self._market_data_service: Optional[MarketDataService] = None
        self._analysis_service: Optional[AnalysisService] = None
        self._ui_state_service: Optional[UiStateService] = None

    def initialize(self, data_dir: Optional[Path] = None) -> None:
        """
        Initialize or reinitialize the application with a data directory.

        Args:
            data_dir: Data directory path. Uses default if not provided.
        """
        if data_dir:
            self._data_dir = data_dir

        self.close()

        settings = Settings(data_dir=self._data_dir)
        set_settings(settings)

        reset_database()
        init_db_with_path(settings.get_data_dir() / "etfdesk.db")

        self._market_data_service = None
        self._analysis_service = None
        self._ui_state_service = None

        self._initialized = True

    @property
    def is_initialized(self) -> bool:
        """Check if context is initialized."""
        return self._initialized

    @property
    def data_dir(self) -> Path:
        """Get the current data directory."""
        return get_settings().get_data_dir()

    def _get_session(self):
        if self._session is None:
            self._session = get_session()
        return self._session

    @property
    def market_data(self) -> MarketDataService:
        """Get the MarketDataService instance."""
        if self._market_data_service is None:
            self._market_data_service = MarketDataService.from_settings(get_settings())
        return self._market_data_service

    @property
    def analysis(self) -> AnalysisService:
        """Get the AnalysisService instance."""
        if self._analysis_service is None:
            self._analysis_service = AnalysisService(
                market_data_service=self.market_data,
                max_workers=get_settings().max_parallel_requests,
            )
        return self._analysis_service

    @property
    def ui_state(self) -> UiStateService:
        """Get the UiStateService instance."""
        if self._ui_state_service is None:
            self._ui_state_service = UiStateService(
                kv_repo=SqlAlchemyKeyValueRepository(self._get_session()),
            )
        return self._ui_state_service

    def close(self) -> None:
        """Clean up resources."""
        if self._session:
            self._session.close()
            self._session = None
        self._ui_state_service = None

