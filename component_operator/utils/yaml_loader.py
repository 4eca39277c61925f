from ruamel.yaml import YAML

def get_yaml_instance() -> YAML:
    # configuration is only ever read, plain dicts are all the models need
    yaml = YAML(typ="safe", pure=True)
    return yaml
