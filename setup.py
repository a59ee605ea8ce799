from setuptools import setup

setup(name='termframe',
      version='0.0.1',
      description='render pixel frames as colored text and read key events in a raw terminal',
      url='https://github.com/thomasballinger/scottwasright',
      author='Thomas Ballinger',
      author_email='thomasballinger@gmail.com',
      license='MIT',
      packages=['termframe'],
      install_requires=['numpy'],
      extras_require={'test': ['pyte', 'pytest']},
      entry_points={'console_scripts': ['termframe = termframe.main:main']},
      python_requires='>=3.6',
      zip_safe=False)
