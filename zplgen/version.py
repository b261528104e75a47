from importlib.metadata import PackageNotFoundError, version

DISTRIBUTION = 'zplgen'


def get_version():
    '''returns the installed version of zplgen, 0.0.0 when running from a checkout'''
    try:
        return version(DISTRIBUTION)
    except PackageNotFoundError:
        return '0.0.0'
