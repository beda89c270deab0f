#!/usr/bin/env python3

import os
from setuptools import setup, find_packages


here = os.path.abspath(os.path.dirname(__file__))
with open(os.path.join(here, 'README.md')) as f:
    README = f.read()

if __name__ == "__main__":
    setup(
        name = 'opencloud',
        version = '0.1.0',
        description = 'Client library for OpenStack and Rackspace compatible cloud services.',
        long_description = README,
        long_description_content_type = 'text/markdown',
        classifiers = [
            "Programming Language :: Python",
            "Programming Language :: Python :: 3",
            "Topic :: Internet :: WWW/HTTP",
            "Topic :: System :: Distributed Computing",
        ],
        keywords = 'openstack rackspace cloud api client',
        packages = find_packages(include = ['opencloud', 'opencloud.*']),
        include_package_data = True,
        zip_safe = False,
        python_requires = '>=3.10',
        install_requires = [
            'python-dateutil',
            'pyyaml',
            'requests',
            'rackit @ git+https://github.com/azimuth-cloud/rackit.git',
        ],
        extras_require = {
            'test': ['pytest'],
        },
    )
