"""
Spark Session Manager.

Provides the Spark session used to export parsed listings for inventory
analysis.

Example:
    manager = SparkSessionManager(app_name="DatasetInventory")
    spark = manager.get_or_create()
    # ... use spark session
    manager.stop()
"""

from pyspark.sql import SparkSession
from typing import Optional


class SparkSessionManager:
    """
    Manages Spark session lifecycle for listing exports.

    Attributes:
        app_name: Name of the Spark application
        master: Spark master URL (default: local[*])
        extra_configs: Additional Spark configurations

    Example:
        >>> manager = SparkSessionManager(app_name="MemberInventory")
        >>> spark = manager.get_or_create()
        >>> spark.createDataFrame(rows, schema)
    """

    # Java 17+ module access flags required for Spark compatibility
    JAVA_17_OPTIONS = " ".join([
        "--add-opens=java.base/java.nio=ALL-UNNAMED",
        "--add-opens=java.base/sun.nio.ch=ALL-UNNAMED",
        "--add-opens=java.base/java.lang=ALL-UNNAMED",
        "--add-opens=java.base/java.util=ALL-UNNAMED",
    ])

    def __init__(
        self,
        app_name: str = "MainframeListingExport",
        master: str = "local[*]",
        extra_configs: Optional[dict[str, str]] = None,
    ):
        """
        Initialize the Spark session manager.

        Args:
            app_name: Application name for Spark UI
            master: Spark master URL (local[*], yarn, etc.)
            extra_configs: Additional Spark configurations
        """
        self.app_name = app_name
        self.master = master
        self.extra_configs = extra_configs or {}

        self._session: Optional[SparkSession] = None

    def get_or_create(self) -> SparkSession:
        """
        Get existing Spark session or create a new one.

        The session is only created when first requested.

        Returns:
            Active SparkSession instance
        """
        if self._session is not None:
            return self._session

        builder = (
            SparkSession.builder
            .appName(self.app_name)
            .master(self.master)
            .config("spark.driver.extraJavaOptions", self.JAVA_17_OPTIONS)
            .config("spark.executor.extraJavaOptions", self.JAVA_17_OPTIONS)
            .config("spark.sql.session.timeZone", "UTC")
        )

        for key, value in self.extra_configs.items():
            builder = builder.config(key, value)

        self._session = builder.getOrCreate()
        return self._session

    def stop(self) -> None:
        """Stop the Spark session and release resources."""
        if self._session is not None:
            self._session.stop()
            self._session = None

    @property
    def is_active(self) -> bool:
        """Check if the Spark session is currently active."""
        return self._session is not None
