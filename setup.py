"""
Packaging script for PyPI.
"""
import setuptools

setuptools.setup(
	name='tagged-adt',
	version='0.1.0',
	packages=['tagged'],
	license='MIT',
	description='Pair, Sum and Maybe: small closed algebraic data types with total dispatch',
	long_description=open('README.md').read(),
	long_description_content_type="text/markdown",
	classifiers=[
		"Programming Language :: Python :: 3.12",
		"License :: OSI Approved :: MIT License",
		"Operating System :: OS Independent",
		"Development Status :: 3 - Alpha",
		"Intended Audience :: Developers",
		"Intended Audience :: Education",
		"Topic :: Software Development :: Libraries",
		"Topic :: Education",
	],
	python_requires='>=3.12',
	install_requires=[
		"booze-tools>=0.6.2.1",
	],
	extras_require={
		'test': ["pytest"],
	},
)
