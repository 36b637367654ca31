APP_NAME = "yamlprops"
ENV_PREFIX = "YAMLPROPS_"
