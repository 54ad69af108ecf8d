#!/usr/bin/env python
""" Installation script for octsphere package """

from os.path import join as pjoin

from setuptools import setup


class Bunch:
    def __init__(self, vars):
        for key, name in vars.items():
            if key.startswith('__'):
                continue
            self.__dict__[key] = name


def read_vars_from(ver_file):
    """ Read variables from Python text file

    Parameters
    ----------
    ver_file : str
        Filename of file to read

    Returns
    -------
    info_vars : Bunch instance
        Bunch object where variables read from `ver_file` appear as
        attributes
    """
    ns = {}
    with open(ver_file, 'rt') as fobj:
        exec(fobj.read(), ns)
    return Bunch(ns)


# Get version and release info, which is all stored in octsphere/info.py
info = read_vars_from(pjoin('octsphere', 'info.py'))


def main(**extra_args):
    setup(name=info.NAME,
          maintainer=info.MAINTAINER,
          maintainer_email=info.MAINTAINER_EMAIL,
          description=info.DESCRIPTION,
          long_description=info.LONG_DESCRIPTION,
          url=info.URL,
          license=info.LICENSE,
          classifiers=info.CLASSIFIERS,
          author=info.AUTHOR,
          author_email=info.AUTHOR_EMAIL,
          platforms=info.PLATFORMS,
          version=info.VERSION,
          provides=info.PROVIDES,
          packages=['octsphere',
                    'octsphere.core',
                    'octsphere.core.tests',
                    'octsphere.io',
                    'octsphere.io.tests',
                    'octsphere.testing',
                    'octsphere.workflows',
                    'octsphere.workflows.tests'],
          install_requires=info.INSTALL_REQUIRES,
          extras_require=info.EXTRAS_REQUIRE,
          python_requires=">= 3.8",
          zip_safe=False,
          entry_points={
              'console_scripts': [
                  'octsphere_mesh = octsphere.workflows.cli:run',
              ],
          },
          **extra_args
          )


# simple way to test what setup will do
# python setup.py install --prefix=/tmp
if __name__ == "__main__":
    main()
