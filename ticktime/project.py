__pkg_bottom__ = True
identity = 'http://fault.io/project/python/ticktime'
name = 'ticktime'
abstract = 'A 100-nanosecond tick point in time and its span.'
icon = '⏱'
study = 'horology'

controller = 'fault.io'
contact = 'mailto:critical@fault.io'

version_info = (0, 1, 0)
version = '.'.join(map(str, version_info))
