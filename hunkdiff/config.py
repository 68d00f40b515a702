# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import os

from jupyter_core.paths import jupyter_config_path

from traitlets import Enum, Integer, HasTraits
from traitlets.config.loader import JSONFileConfigLoader, ConfigFileNotFound

from .diffing import jsondiff, sequences
from .log import set_hunkdiff_log_level


class HunkdiffConfigurable(HasTraits):

    def configured_traits(self, cls):
        traits = cls.class_own_traits(config=True)
        c = {}
        for name, _ in traits.items():
            c[name] = getattr(self, name)
        return c


_config_cache = {}
def config_instance(cls):
    if cls in _config_cache:
        return _config_cache[cls]
    instance = _config_cache[cls] = cls()
    return instance


def _load_config_files(basefilename, path=None):
    """Load config files (json) by filename and path.

    yield each config object in turn.
    """

    if not isinstance(path, list):
        path = [path]
    for path in path[::-1]:
        # path list is in descending priority order, so load files backwards:
        loader = JSONFileConfigLoader(basefilename+'.json', path=path)
        config = None
        try:
            config = loader.load_config()
        except ConfigFileNotFound:
            pass
        if config:
            yield config


def recursive_update(target, new, include_none):
    """Recursively update one dictionary using another.

    None values will delete their keys.
    """
    for k, v in new.items():
        if isinstance(v, dict):
            if k not in target:
                target[k] = {}
            recursive_update(target[k], v, include_none)
            if not include_none and not target[k]:
                # Prune empty subdicts
                del target[k]

        elif not include_none and v is None:
            target.pop(k, None)

        else:
            target[k] = v


def build_config(entrypoint, include_none=False):
    """Collect the configuration for an entrypoint.

    Trait defaults are overridden by `hunkdiff_config.json` files
    in the jupyter config path and finally the current directory.
    """
    if entrypoint not in entrypoint_configurables:
        raise ValueError('Config for entrypoint name %r is not defined! Accepted values are %r.' % (
            entrypoint, list(entrypoint_configurables.keys())
        ))

    # Get config from disk:
    disk_config = {}
    path = jupyter_config_path()
    path.insert(0, os.getcwd())
    for c in _load_config_files('hunkdiff_config', path=path):
        recursive_update(disk_config, c, include_none)

    config = {}
    configurable = entrypoint_configurables[entrypoint]
    for c in reversed(configurable.mro()):
        if issubclass(c, HunkdiffConfigurable):
            recursive_update(config, config_instance(c).configured_traits(c), include_none)
            if (c.__name__ in disk_config):
                recursive_update(config, disk_config[c.__name__], include_none)

    return config


def apply_config(config):
    """Make a built config take effect for subsequent diffs."""
    if 'log_level' in config:
        set_hunkdiff_log_level(config['log_level'], set_main=False)
    if 'algorithm' in config:
        if config['algorithm'] not in sequences.legal_diff_sequence_algorithms:
            raise ValueError('Unknown diff algorithm %r.' % (config['algorithm'],))
        sequences.diff_sequence_algorithm = config['algorithm']
    if 'json_indent' in config:
        jsondiff.json_indent = config['json_indent']


def configure(entrypoint='diff'):
    """Build and apply the configuration for an entrypoint."""
    config = build_config(entrypoint)
    apply_config(config)
    return config


class Global(HunkdiffConfigurable):

    log_level = Enum(
        ('DEBUG', 'INFO', 'WARN', 'ERROR', 'CRITICAL'),
        'INFO',
        help="Set the log level by name.",
    ).tag(config=True)


class Diff(Global):

    algorithm = Enum(
        sequences.legal_diff_sequence_algorithms,
        'myers',
        help="Shortest edit script algorithm to use for sequence diffs.",
    ).tag(config=True)


class JsonDiff(Diff):

    json_indent = Integer(
        2,
        help="Indentation used when serializing objects before diffing them.",
    ).tag(config=True)


entrypoint_configurables = {
    'diff': Diff,
    'json': JsonDiff,
}
