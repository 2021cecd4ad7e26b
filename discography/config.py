import configparser
import logging

config = configparser.ConfigParser()
config.read_dict({
    'database': {
        'url': 'sqlite://',
        'echo': 'no',
    },
    'logging': {
        'level': 'INFO',
    },
})
config.read(['/etc/discography/discography.conf', 'discography.conf'])

fmt = logging.Formatter("[%(asctime)s] %(levelname)s: %(filename)s:%(funcName)s(%(lineno)s): %(message)s")
logger = logging.getLogger("discography")
logger.setLevel(config['logging']['level'].upper())

# stderr logging
sh = logging.StreamHandler()
sh.setLevel(logging.DEBUG)
sh.setFormatter(fmt)
logger.addHandler(sh)

cfg_db: configparser.SectionProxy = config['database']
database_url = cfg_db['url']
database_echo = cfg_db.getboolean('echo')
