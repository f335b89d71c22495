"""
Intercepts import errors concerning optional imports (e.g. Pillow for image I/O) to either:
    - Provide a more detailed error response or
    - Auto-download the specified package
"""

__all__ = ['ConditionalPackageInterceptor']

from importlib import util
import subprocess
import sys
from typing import Union

from mollweidemap.utils.logging import LOGGER


class ConditionalPackageInterceptor:
    """
    Provides automatic pip installation of a package if it isn't found. Only packages added to this
    object using the .permit_packages() method are allowed to be automatically installed.

    To use:
        In your code's entrypoint, add the following code:

            ConditionalPackageInterceptor.permit_packages(
                <list or dict of packages>
            )
            sys.meta_path.append(ConditionalPackageInterceptor)

    Note that this object needs to be registered before the optional import is attempted,
    so the package __init__.py is where it lives.
    """

    PERMITTED_PACKAGES: dict = {}
    AUTO_DOWNLOAD = False

    @classmethod
    def permit_packages(cls, packages: Union[list, dict]) -> None:
        """
        Adds python packages to the list of packages that are permitted to be automatically
        installed.

        The name of a python package is not always the same between "pip install <package>" and
        "import <package>", so packages can be added in two ways:
            As a list: packages will be pip installed exactly as listed
                ["numpy"]
                "import numpy" -> pip install numpy

            As a dict: packages will be pip installed by the corresponding key
                {"PIL": "mollweidemap[image]"}
                "import PIL" -> pip install mollweidemap[image]

        Args:
            packages (Union[list, dict]): The packages that will be allowed to auto-install if
                                          missing

        Returns:
            None
        """
        if isinstance(packages, list):
            cls.PERMITTED_PACKAGES.update({item: item for item in packages})
        elif isinstance(packages, dict):
            cls.PERMITTED_PACKAGES.update(packages)
        else:
            raise TypeError(
                f"Permitted packages must be submitted as a list or dict, not {type(packages)}"
            )

    @classmethod
    def permit_auto_download(cls, option: bool) -> None:
        """
        Defines whether packages may be auto-downloaded or not. Default False.
        """
        cls.AUTO_DOWNLOAD = option

    @classmethod
    def find_spec(  # pylint: disable=unused-argument, inconsistent-return-statements
            cls, name, path, target=None
    ):
        """
        DO NOT USE.

        Called by importlib after every other finder on sys.meta_path has failed to locate
        the package. Will only pip install if the package name is in the PERMITTED_PACKAGES
        class variable; otherwise you'll get the usual "ModuleNotFoundError".

        Args:
            name (str): The name of the package
            path:
            target:

        Returns:
            A ModuleSpec if the package was installed, otherwise None
        """
        if name not in cls.PERMITTED_PACKAGES:
            return

        if cls.AUTO_DOWNLOAD:
            LOGGER.info("Module %r not installed. Attempting to pip install...", name)
            try:
                subprocess.run(
                    [sys.executable, '-m', 'pip', 'install', cls.PERMITTED_PACKAGES[name]],
                    check=True
                )
            except subprocess.CalledProcessError:
                return None

            return util.find_spec(name)

        raise ModuleNotFoundError(
            f"You are attempting to use a module which requires an optional installation ({name}). "
            "Please choose one of the following options to continue: \n\n "
            "1) Enable package auto-installation using: \n"
            "    from mollweidemap.utils.conditional_imports import ConditionalPackageInterceptor \n"
            "    ConditionalPackageInterceptor.permit_auto_download(True) \n\n"
            "2) Pip install the package yourself using the following command: \n"
            f"    pip install {cls.PERMITTED_PACKAGES[name]}"
        )
