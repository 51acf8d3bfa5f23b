""" worker_tools.common namespace """

from .config.environment import demand_env_var, demand_env_var_as_bool, get_env_var
