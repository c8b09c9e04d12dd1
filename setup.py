# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from setuptools import setup


setup(
  name='svgpen',
  version='0.0.1',
  description='svgpen writes SVG documents element by element to any text sink.',
  python_requires='>=3.10',

  packages=['svgpen', 'svgpen.bin', 'utest'],
  entry_points={'console_scripts': ['svgpen=svgpen.bin.svgpen:main']},
)
