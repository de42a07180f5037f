from setuptools import setup
from pathlib import Path

setup(
    name='kubegvr',
    version="0.1.0",
    description='Kubernetes resource identifiers and action to verb mapping',
    long_description=Path("README.md").read_text(),
    long_description_content_type="text/markdown",
    license='MIT',
    packages=['kubegvr', 'kubegvr.config', 'kubegvr.core'],
    install_requires=[
        'lightkube >= 0.17.0',
        'lightkube-models >= 1.15.12.0',
        'PyYAML'
    ],
    extras_require={
        "dev": [
            "pytest",
        ]
    },
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'Intended Audience :: System Administrators',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3.8',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
        'Programming Language :: Python :: 3.13'
    ]
)
