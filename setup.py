# -*- coding: utf-8 -*-
short_description = 'Python library for the Amazon MWS service status and inbound transport APIs'

from setuptools import setup

setup(
    name='mwsclient',
    version='0.1',
    maintainer="W. Aaron Morris",
    maintainer_email="waaronmorris@gmail.com",
    url="https://github.com/waaronmorris/mws",
    description=short_description,
    long_description="See README.md",
    packages=['mwsclient'],
    install_requires=[
        'requests',
        'python-dotenv',
    ],
    extras_require={
        'test': ['pytest'],
    },
    python_requires='>=3.6',
    classifiers=[
        'Development Status :: 2 - Pre-Alpha',
        'Environment :: Web Environment',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: BSD License',
        'Operating System :: OS Independent',
        'Programming Language :: Python',
        'Topic :: Internet :: WWW/HTTP :: Dynamic Content',
        'Topic :: Software Development',
        'Topic :: Software Development :: Libraries :: Application Frameworks',
        'Programming Language :: Python :: 3',
    ],
    platforms=['OS Independent'],
    license='Unlicense',
    include_package_data=True,
    zip_safe=False
)
