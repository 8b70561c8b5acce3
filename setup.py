# Copyright (c) 2021 - present / Neuralmagic, Inc. All Rights Reserved.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing,
# software distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

import os
from typing import Dict, List, Tuple

from setuptools import find_packages, setup


# Load version info from the lapwatch package without importing it
_version_path = os.path.join(
    os.path.dirname(os.path.realpath(__file__)), "src", "lapwatch", "version.py"
)
_version_globals = {}
with open(_version_path, "r") as version_file:
    exec(version_file.read(), _version_globals)
version = _version_globals["version"]

_PACKAGE_NAME = "lapwatch"

_deps = [
    "pydantic>=1.8.2",
    "click>=7.1.2,!=8.0.0",  # latest version < 8.0 + blocked version with reported bug
]
_dev_deps = [
    "black==22.12.0",
    "flake8>=3.8.3",
    "isort>=5.7.0",
    "flaky>=3.8.1",
    "pytest>=6.0.0",
]


def _setup_package_dir() -> Dict:
    return {"": "src"}


def _setup_packages() -> List:
    return find_packages(
        "src", include=["lapwatch", "lapwatch.*"], exclude=["*.__pycache__.*"]
    )


def _setup_install_requires() -> List:
    return _deps


def _setup_extras() -> Dict:
    return {"dev": _dev_deps}


def _setup_entry_points() -> Dict:
    return {
        "console_scripts": [
            "lapwatch.slow_thinker=lapwatch.slow_thinker:main",
        ]
    }


def _setup_long_description() -> Tuple[str, str]:
    return open("README.md", "r", encoding="utf-8").read(), "text/markdown"


setup(
    name=_PACKAGE_NAME,
    version=version,
    description=(
        "Thread safe stopwatches with unique ids, created and tracked "
        "through a shared registry"
    ),
    long_description=_setup_long_description()[0],
    long_description_content_type=_setup_long_description()[1],
    keywords="stopwatch, timer, lap, thread safe, registry",
    license="Apache",
    package_dir=_setup_package_dir(),
    packages=_setup_packages(),
    install_requires=_setup_install_requires(),
    extras_require=_setup_extras(),
    entry_points=_setup_entry_points(),
    python_requires=">=3.8",
    classifiers=[
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3 :: Only",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: Apache Software License",
        "Topic :: Software Development",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
)
