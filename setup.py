# -*- coding: utf-8 -*-

import _version
from setuptools.command.build_py import build_py
from setuptools import Command
from setuptools import find_packages
from setuptools import setup
import fnmatch
import glob
import shutil
import os


PROJECT = "radixcrunch"

########################################
## Disable hardlinks when not working ##
########################################
if hasattr(os, "link"):
    tempfile = __file__ + ".tmp"
    try:
        os.link(__file__, tempfile)
    except OSError as e:
        del os.link
    finally:
        if os.path.exists(tempfile):
            os.remove(tempfile)


###########################
## Get setup information ##
###########################
def get_version():
    return _version.strictversion


def get_devstatus():
    # The development status is derived from the release level
    mapping = {"dev": 2, "alpha": 3, "beta": 4, "rc": 5, "final": 6}
    cycle = {
        1: "Planning",
        2: "Pre-Alpha",
        3: "Alpha",
        4: "Beta",
        5: "Production/Stable",
        6: "Mature",
        7: "Inactive",
    }

    status = mapping[_version.version_info.releaselevel]

    return "Development Status :: %d - %s" % (status, cycle[status])


def get_readme():
    dirname = os.path.dirname(os.path.abspath(__file__))
    with open(os.path.join(dirname, "README.rst"), "r") as fp:
        long_description = fp.read()
    return long_description


#####################
## Command classes ##
#####################
cmdclass = {}


#######################
## "version" command ##
#######################
class VersionOfAllPackages(Command):
    description = "Get project version"
    user_options = []

    def initialize_options(self):
        pass

    def finalize_options(self):
        pass

    def run(self):
        print("This version of {} is {}".format(PROJECT, _version.version))


cmdclass["version"] = VersionOfAllPackages


########################
## "build_py" command ##
########################
class BuildWithVersion(build_py):
    """
    Enhanced build_py which copies version.py to <PROJECT>._version.py
    """

    description = "build with version info"

    def find_package_modules(self, package, package_dir):
        modules = build_py.find_package_modules(self, package, package_dir)
        if "." not in package:
            modules.append((package, "_version", "_version.py"))
        return modules


cmdclass["build_py"] = BuildWithVersion


#####################
## "clean" command ##
#####################
class CleanCommand(Command):
    """Custom clean command to tidy up the project root."""

    description = "Clean build and compiled files"
    user_options = []

    def initialize_options(self):
        pass

    def finalize_options(self):
        pass

    def run(self):
        shutil.rmtree("./build", True)
        shutil.rmtree("./dist", True)

        patterns = ["*.egg-info"]
        for pattern in patterns:
            for dirname in glob.glob(pattern):
                shutil.rmtree(dirname, True)

        patterns = ["*.pyc"]
        for root, dirnames, filenames in os.walk(os.path.join("src", PROJECT)):
            for pattern in patterns:
                for filename in fnmatch.filter(filenames, pattern):
                    os.remove(os.path.join(root, filename))


cmdclass["clean"] = CleanCommand


#####################
## "name" command ##
#####################
class NameCommand(Command):
    """Print project name."""

    user_options = []

    def initialize_options(self):
        pass

    def finalize_options(self):
        pass

    def run(self):
        print(PROJECT)


cmdclass["name"] = NameCommand


#######################
## Trove classifiers ##
#######################
classifiers = [
    get_devstatus(),
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "License :: OSI Approved :: MIT License",
    "Natural Language :: English",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Software Development :: Libraries :: Python Modules",
]


##################
## Requirements ##
##################
install_requires = [
    "setuptools",
    "numpy",
    "pandas",
    "jsonpickle",
]
extras_require = {
    "test": ["testfixtures", "pytest"],
}
setup_requires = ["setuptools"]


###################
## Package setup ##
###################
setup(
    name=PROJECT,
    version=get_version(),
    url="https://github.com/woutdenolf/radixcrunch",
    author="Wout De Nolf",
    author_email="woutdenolf@users.sf.net",
    classifiers=classifiers,
    description="Arbitrary-base conversion of digit vectors with benchmarks",
    long_description=get_readme(),
    install_requires=install_requires,
    extras_require=extras_require,
    setup_requires=setup_requires,
    python_requires=">=3.7",
    package_dir={"": "src"},
    packages=find_packages("src"),
    license="MIT",
    cmdclass=cmdclass,
    test_suite="{}.tests.test_all.main_test_suite".format(PROJECT),
)
