import importlib
import pkgutil

# do from .module import * for all modules in this package
for module_info in pkgutil.iter_modules(__path__):
    if module_info.name.startswith("_"):
        continue

    module = importlib.import_module(f"{__name__}.{module_info.name}")
    names = getattr(module, "__all__", [])
    globals().update({name: getattr(module, name) for name in names})
