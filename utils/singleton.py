import threading

class Singleton:
  """One instance per subclass, created under a class-wide lock."""
  _instances: dict = {}
  _lock = threading.Lock()

  def __new__(cls, *args, **kwargs):
    if cls not in Singleton._instances:
      with Singleton._lock:
        if cls not in Singleton._instances:
          instance = super(Singleton, cls).__new__(cls)
          instance._Singleton__initialized = False
          Singleton._instances[cls] = instance
    return Singleton._instances[cls]

  @classmethod
  def reset(cls):
    with Singleton._lock:
      Singleton._instances.pop(cls, None)
