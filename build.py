import subprocess
import sys
import os


def build_args() -> list[str]:
    args = [
        "pyinstaller",
        "main.py",
        "--name",
        "SkillUp",
        "--clean",
        "--onefile",
        "--collect-all",
        "flet_desktop",  # Bundle Flet desktop runtime
        "--collect-data",
        "flet",  # Bundle Flet data files (icons.json etc.)
        "--collect-submodules",
        "skillup",
        # requests の CA バンドル
        "--collect-data",
        "certifi",
    ]

    # CI環境（GitHub Actions等）でない場合のみ、--noconsole を追加する
    if not os.environ.get("CI"):
        args.append("--noconsole")
    return args


def build():
    args = build_args()
    print(f"Running: {' '.join(args)}")
    result = subprocess.run(args)

    if result.returncode == 0:
        print("\nBuild successful! Executable is in the 'dist' folder.")
    else:
        print("\nBuild failed.")
        sys.exit(result.returncode)


if __name__ == "__main__":
    build()
