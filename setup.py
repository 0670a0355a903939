# Copyright (c) 2026 Renata Hodovan, Akos Kiss.
#
# Licensed under the BSD 3-Clause License
# <LICENSE.rst or https://opensource.org/licenses/BSD-3-Clause>.
# This file may not be copied, modified, or distributed except
# according to those terms.

from setuptools import find_packages, setup


def lookinator_version():
    def _version_scheme(version):
        return version.format_with('{tag}')

    def _local_scheme(version):
        if version.exact and not version.dirty:
            return ''
        parts = ['{distance}'.format(distance=version.distance)]
        if version.node:
            parts.append('{node}'.format(node=version.node))
        if version.dirty:
            parts.append('d{time:%Y%m%d}'.format(time=version.time))
        return '+{parts}'.format(parts='.'.join(parts))

    return {'version_scheme': _version_scheme, 'local_scheme': _local_scheme, 'fallback_version': '0.1.0'}


setup(
    name='lookinator',
    packages=find_packages(exclude=['tests', 'tests.*']),
    url='https://github.com/renatahodovan/lookinator',
    license='BSD',
    author='Renata Hodovan, Akos Kiss',
    author_email='hodovan@inf.u-szeged.hu, akiss@inf.u-szeged.hu',
    description='Lookinator: ATN Graph Model and Lookahead Reachability Engine',
    long_description=open('README.rst').read(),
    install_requires=['antlr4-python3-runtime', 'jinja2'],
    extras_require={
        'test': ['pytest'],
    },
    zip_safe=False,
    include_package_data=True,
    package_data={'lookinator.tool': ['resources/*.jinja']},
    python_requires='>=3.9',
    use_scm_version=lookinator_version,
    classifiers=[
        'Intended Audience :: Developers',
        'License :: OSI Approved :: BSD License',
        'Operating System :: OS Independent',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Topic :: Software Development :: Compilers',
        'Topic :: Software Development :: Libraries',
    ],
)
