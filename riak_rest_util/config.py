import configparser
import logging
import logging.config
import os

# class to parse the client inputs from an ini file
#
# [global]
# timeout:10
#
# [client]
# host:127.0.0.1
# port:8098
# prefix:riak
# r:2
# w:2
# dw:2

DEFAULT_LOG_CONFIG = os.path.join(os.path.dirname(os.path.abspath(__file__)),
                                  "conf", "logging.conf")


def configure_logging(log_config_file=None):
    """
    Apply a logging.config file. Defaults to the packaged logging.conf
    :param log_config_file: Path to a fileConfig style file
    :return None:
    """
    log_config_file = log_config_file or DEFAULT_LOG_CONFIG
    if not os.path.exists(log_config_file):
        raise ValueError("Log config file '%s' not found" % log_config_file)
    logging.config.fileConfig(log_config_file,
                              disable_existing_loggers=False)


class ClientInput(object):
    CLIENT_KWARGS = ["host", "port", "prefix", "client_id",
                     "r", "w", "dw", "timeout"]

    def __init__(self):
        self.client_params = dict()

    def param(self, name, *args):
        """Returns the parameter or a default value

        The first parameter is the name of property, the second
        parameter is the default value. If no default value is given,
        a ValueError is raised.
        """
        if name in self.client_params:
            return ClientInput._parse_param(self.client_params[name])
        elif len(args) == 1:
            return args[0]
        else:
            raise ValueError("Parameter `{}` must be set "
                             "in the client configuration".format(name))

    def client_kwargs(self):
        """
        :return: Dict of RiakClient() arguments present in the config
        """
        kwargs = dict()
        for name in ClientInput.CLIENT_KWARGS:
            if name in self.client_params:
                kwargs[name] = self.param(name)
        # Names and ids stay strings even if they look numeric
        for name in ["host", "prefix", "client_id"]:
            if name in kwargs:
                kwargs[name] = str(self.client_params[name])
        return kwargs

    @staticmethod
    def _parse_param(value):
        try:
            return int(value)
        except ValueError:
            pass

        try:
            return float(value)
        except ValueError:
            pass

        if value.lower() == "false":
            return False

        if value.lower() == "true":
            return True

        return value


class ClientInputParser(object):
    @staticmethod
    def parse_from_file(input_file):
        if not os.path.exists(input_file):
            raise ValueError("Config file '%s' not found" % input_file)

        client_input = ClientInput()
        config = configparser.ConfigParser()
        config.read(input_file)
        global_properties = dict()
        for section in config.sections():
            if section == "client":
                for option in config.options(section):
                    client_input.client_params[option] = \
                        config.get(section, option)
            elif section == "global":
                for option in config.options(section):
                    global_properties[option] = config.get(section, option)

        # Global values fill only the unset client options
        for option, value in global_properties.items():
            client_input.client_params.setdefault(option, value)
        return client_input
