# Writes a config.yaml holding the default demo settings
from pathlib import Path
import yaml
from utils.config import DEFAULT_CONFIG_PATH, DEFAULTS

OUTPUT_YAML = DEFAULT_CONFIG_PATH

def build_config(output: Path = OUTPUT_YAML) -> Path:
    data = {
        "families": list(DEFAULTS["families"]),
        "log_level": DEFAULTS["log_level"],
        "log_to_file": DEFAULTS["log_to_file"],
        "log_dir": DEFAULTS["log_dir"],
    }

    # keep key order
    with output.open("w", encoding="utf-8") as f:
        yaml.safe_dump(data, f, sort_keys=False, allow_unicode=True)
    return output

def main():
    output = build_config()
    print(f"Created '{output}'")

if __name__ == "__main__":
    main()
