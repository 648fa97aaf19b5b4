import os
import re

from setuptools import find_packages, setup


BASEDIR = os.path.abspath(os.path.dirname(__file__))
SRCDIR = os.path.join(BASEDIR, 'src')
NAME = 'astrocal'
ASTROCAL_DIR = os.path.join(SRCDIR, NAME)


def _get_version():
    with open(os.path.join(ASTROCAL_DIR, '__init__.py')) as f:
        match = re.search(r"^__version__ = '([^']+)'", f.read(), re.M)
    return match.group(1)


setup(
    name=NAME,
    version=_get_version(),
    description='Calendar date and time of day components with julian/gregorian '
                'calendar reform and leap second support',
    license='MIT',
    python_requires='>=3.8',
    package_dir={'': 'src'},
    packages=find_packages('src'),
    install_requires=['numpy'],
    extras_require={'test': ['pytest']},
)
