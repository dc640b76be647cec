from profilemutex.core.application import run

__all__ = ["run"]

if __name__ == "__main__":
    run()
