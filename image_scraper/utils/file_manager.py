import json
import os
import shutil
from typing import Any


class FileManager:
    @staticmethod
    def ensure_directory(directory: str) -> None:
        if directory and not os.path.exists(directory):
            os.makedirs(directory, exist_ok=True)

    @staticmethod
    def desktop_directory() -> str:
        desktop = os.path.join(os.path.expanduser('~'), 'Desktop')
        FileManager.ensure_directory(desktop)
        return desktop

    @staticmethod
    def load_json(filepath: str) -> Any:
        with open(filepath) as file:
            return json.load(file)

    @staticmethod
    def remove_quietly(filepath: str) -> bool:
        """Best-effort delete; returns whether the file is gone afterwards"""
        try:
            os.remove(filepath)
        except FileNotFoundError:
            return True
        except OSError:
            return False
        return True

    @staticmethod
    def replace_file(source: str, destination: str) -> bool:
        """Delete whatever sits at destination, then move source there.

        Both steps are best-effort: failures are swallowed and only reflected
        in the return value.
        """
        FileManager.remove_quietly(destination)
        try:
            shutil.move(source, destination)
        except OSError:
            return False
        return True
