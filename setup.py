# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from setuptools import find_packages, setup


setup(
  name='ctorgen',
  version='0.0.1',
  description='ctorgen generates flexible constructors for Python classes.',
  python_requires='>=3.10',
  packages=find_packages(include=['ctorgen', 'ctorgen.*', 'utest']),
  license='CC0-1.0',
)
