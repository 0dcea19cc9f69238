import setuptools

setuptools.setup(
    name="loghorizon-dice",
    version="0.1.0",
    description="Log Horizon TRPG dice commands and random tables, bases on Alconna",
    license='AGPL-3.0',
    classifiers=[
        "Development Status :: 4 - Beta",
        "License :: OSI Approved :: GNU Affero General Public License v3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Operating System :: OS Independent",
    ],
    packages=setuptools.find_namespace_packages(include=["app", "app.*", "library", "library.*"]),
    package_data={"library.loghorizon": ["locales/*.yml"]},
    install_requires=[
        "arclet-alconna>=1.7",
        "loguru>=0.7",
        "pydantic>=2",
        "PyYAML>=6",
    ],
    extras_require={"test": ["pytest>=7"]},
    python_requires='>=3.9',
)
