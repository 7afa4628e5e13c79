# noqa: D100
import os

from setuptools import setup

here = os.path.abspath(os.path.dirname(__file__))
README = open(os.path.join(here, 'README.rst')).read()

requirements = None
with open(os.path.join(here, 'requirements.txt'), 'r') as f:
    requirements = [line.rstrip()
                    for line in f.readlines() if line.strip() and not line.startswith('-')]

setup(name='rtlite',
      version='1.0.0',
      description='Read-only Python interface to the Request Tracker REST 1.0 API',
      long_description=README,
      license='GNU General Public License (GPL)',
      install_requires=requirements,
      extras_require={
          'test': ['pytest'],
          'dev': ['mypy', 'ruff', 'types-requests'],
      },
      packages=['rtlite'],
      package_data={'rtlite': ['py.typed']},
      entry_points={'console_scripts': ['rtlite = rtlite.__main__:main']},
      zip_safe=False,
      python_requires='>=3.8',
      classifiers=[
          'Development Status :: 4 - Beta',
          'Environment :: Console',
          'Intended Audience :: Developers',
          'License :: OSI Approved :: GNU General Public License v3 (GPLv3)',
          'Operating System :: POSIX',
          'Programming Language :: Python',
          'Programming Language :: Python :: 3 :: Only',
          'Programming Language :: Python :: 3',
          'Topic :: Software Development :: Libraries :: Python Modules'
      ]
      )
