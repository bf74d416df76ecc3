import os.path
import re

from setuptools import find_packages, setup

try:
    # Import all script providers so that ENTRYPOINTS gets populated.
    from hablib.scripts import pkg, svc  # noqa: F401
    from hablib.scripts.utils import ENTRYPOINTS
except ImportError:
    # Avoid chicken-and-egg dependency requirements during initial installation.
    # This means you need to re-run setup in order to gain script entrypoints.
    ENTRYPOINTS = []


HERE = os.path.abspath(os.path.dirname(__file__))

README = os.path.join(HERE, "README.rst")


def version():
    with open(os.path.join(HERE, "hablib", "__init__.py")) as init:
        return re.search(r'^__version__ = "([^"]+)"', init.read(), re.M).group(1)


setup(name="hablib",
      version=version(),
      description="Habitat package installation and service lifecycle management via the hab CLI.",
      long_description=open(README).read(),
      long_description_content_type="text/x-rst",
      platforms=["Any"],
      python_requires=">=3.8",
      install_requires=["docopt"],
      extras_require={"test": ["pytest"]},
      packages=find_packages(exclude=["tests", "tests.*"]),
      entry_points={"console_scripts": ENTRYPOINTS})
