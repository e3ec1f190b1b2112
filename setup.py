#! /usr/bin/env python

from setuptools import setup, find_packages


# Trove classifiers for PyPI
classifiers = {"classifiers": [
	"Development Status :: 4 - Beta",
	"Environment :: Console",
	"Intended Audience :: Developers",
	"License :: OSI Approved :: BSD License",
	"Natural Language :: English",
	"Operating System :: OS Independent",
	"Programming Language :: Python",
	"Programming Language :: Python :: 3",
	"Topic :: Multimedia :: Graphics",
	"Topic :: Text Processing :: Fonts",
]}

long_description = """\
pcfLib reads X11 Portable Compiled Format (PCF) bitmap fonts from Python.
It decodes the table of contents and the metrics, bitmaps and encodings
tables, and looks up the raster bitmap and spacing metrics of a glyph by
character code. The package also contains a tool called "pcfdump" which
prints glyphs as ASCII art.
"""


def my_scm_version():
	return {
		"write_to": "Lib/pcfLib/version.py",
		"version_scheme": "guess-next-dev",
		# used when building outside of a git checkout
		"fallback_version": "0.1.0",
	}


setup(
	name="pcflib",
	use_scm_version=my_scm_version,
	description="Tools to read PCF bitmap fonts",
	license="OpenSource, BSD-style",
	platforms=["Any"],
	long_description=long_description,
	package_dir={'': 'Lib'},
	packages=find_packages("Lib"),
	python_requires=">=3.7",
	install_requires=[
		"fonttools>=4.2",
	],
	extras_require={
		"test": ["pytest"],
	},
	entry_points={
		'console_scripts': [
			"pcfdump = pcfLib.dump:main",
		]
	},
	**classifiers
)
