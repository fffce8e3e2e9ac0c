import os
import yaml

DEFAULT_CONFIG = os.path.join("config", "player.yaml")


def load_config(section=None, file_path=DEFAULT_CONFIG):
    """
    加载 YAML 配置文件，并返回指定部分配置
    :param section: 配置块名称，例如 'logging'
    :param file_path: 配置文件路径（相对路径按项目根目录解析）
    :return: dict；文件不存在、文件为空或没有该配置块时返回 {}
    """
    if os.path.isabs(file_path):
        config_file = file_path
    else:
        config_path = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
        config_file = os.path.join(config_path, file_path)
    if not os.path.exists(config_file):
        return {}
    with open(config_file, 'r', encoding='utf-8') as f:
        config = yaml.safe_load(f) or {}
    if section:
        return config.get(section) or {}
    return config
