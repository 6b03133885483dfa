"""
module ghosttext.config.ghosttextconfig

Contains the definition of the GhostTextConfig class, a dataclass that represents
a set of ghosttext configurations
"""

from dataclasses import dataclass
import json
import os
from typing import Any, Dict, Type

from dataclasses_json import dataclass_json, Undefined
import platformdirs

from .. import constants
from .exceptions import InvalidConfigException


@dataclass_json(undefined=Undefined.RAISE)
@dataclass
class GhostTextConfig:
    """
    class GhostTextConfig

    Dataclass that represents a set of ghosttext configurations
    """

    version: str
    debounce_ms: int = constants.DEFAULT_DEBOUNCE_MS
    cache_capacity: int = constants.DEFAULT_CACHE_CAPACITY
    autocomplete_enabled: bool = True
    suggestion_class_name: str = constants.SUGGESTION_CLASS_NAME
    suggestion_style: str = constants.SUGGESTION_STYLE
    color_scheme: str = constants.DEFAULT_COLOR_SCHEME
    provider: str | None = None

    @staticmethod
    def default_path() -> str:
        """
        Returns the default path that the current user's configuration should be read from

        Args:
            None

        Returns:
            str: The path where the current user's configuration file should be

        Raises:
            Nothing
        """

        return os.path.join(
            platformdirs.user_data_dir(
                appname=constants.APPLICATION_NAME,
                version=constants.APPLICATION_VERSION,
            ),
            "config.json",
        )

    @staticmethod
    def _ensure_directory(dir_path: str) -> None:
        if not os.path.isdir(dir_path):
            os.makedirs(dir_path)

    @staticmethod
    def _ensure_file(file_path: str) -> None:
        # first, ensure the directory exists
        GhostTextConfig._ensure_directory(os.path.dirname(file_path))

        # then, create the file if needed
        if not os.path.isfile(file_path):
            GhostTextConfig.make_default().to_file(file_path)

    @classmethod
    def from_json_data(
        cls: Type["GhostTextConfig"], json_data: Dict[str, Any]
    ) -> "GhostTextConfig":
        """
        Constructs a GhostTextConfig instance from the provided json dict and
        validates it

        Args:
            json_data (Dict[str, Any]): The json data from which to construct the
                GhostTextConfig

        Returns:
            GhostTextConfig: A GhostTextConfig instance containing the data from the
                provided dict

        Raises:
            UndefinedParameterError: If the provided dict contains unknown keys
            InvalidConfigException: If a provided value is out of range
        """

        # pylint: disable=no-member
        config: GhostTextConfig = cls.from_dict(json_data)  # type: ignore
        config.validate()

        return config

    @classmethod
    def from_file(cls: Type["GhostTextConfig"], path: str) -> "GhostTextConfig | None":
        """
        Constructs a GhostTextConfig instance from the provided JSON file

        Args:
            path (str): The file to read JSON config data from

        Returns:
            GhostTextConfig | None: A GhostTextConfig instance containing the data
                from the provided file or None if it could not be read

        Raises:
            Nothing
        """

        # check if the config file exists and create it if not
        GhostTextConfig._ensure_file(path)

        # pylint: disable=broad-exception-caught
        try:
            with open(path, "r", encoding="utf-8") as config_file:
                return GhostTextConfig.from_json_data(json.loads(config_file.read()))
        except Exception as exc:
            print(f"Unable to read config from target path '{path}': {exc}")
            return None

    @staticmethod
    def make_default() -> "GhostTextConfig":
        """
        Constructs a GhostTextConfig instance containing the default configuration

        Args:
            None

        Returns:
            GhostTextConfig: Instance containing default settings

        Raises:
            Nothing
        """

        return GhostTextConfig(version=constants.CONFIG_VERSION)

    def to_file(self: "GhostTextConfig", output_path: str) -> None:
        """
        Writes this GhostTextConfig instance to the file with the specified path as
        JSON data.

        Args:
            output_path (str): The path of the file to write the config to

        Returns:
            Nothing

        Raises:
            Exception: If the file was unable to be written to
        """

        with open(output_path, "w", encoding="utf-8") as output_file:
            # pylint: disable=no-member
            print(self.to_json(indent=2), file=output_file)

    def validate(self: "GhostTextConfig") -> None:
        if self.debounce_ms < 0:
            raise InvalidConfigException(
                f"debounce_ms must not be negative (got {self.debounce_ms})"
            )

        if self.cache_capacity < 1:
            raise InvalidConfigException(
                f"cache_capacity must be at least 1 (got {self.cache_capacity})"
            )
