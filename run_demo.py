"""Demo script: fly every stock rocket at every stock target and tabulate the outcomes."""
from launch_sim.config import create_default_config
from launch_sim.main import run_mission
from launch_sim.registry import create_default_registries
import numpy as np

config = create_default_config()
rockets, targets = create_default_registries(config)

print("\n===== FLEET vs TARGETS =====")
print(f"{'Rocket':<14} | {'Target':<12} | {'Result':<8} | {'Time (s)':>8} | "
      f"{'Alt (km)':>9} | {'Peak v (km/h)':>13} | Reason")
print("-" * 95)

for rocket in rockets:
    for target in targets:
        result, log, reason = run_mission(rocket, target, config=config, verbose=False)
        peak_speed = float(np.max(log.speed)) if len(log) > 0 else 0.0
        outcome = "SUCCESS" if result.successful else "FAILED"
        duration = log.time[-1] if len(log) > 0 else 0
        altitude = log.altitude[-1] if len(log) > 0 else 0.0
        print(f"{rocket.name:<14} | {target.name:<12} | {outcome:<8} | {duration:>8d} | "
              f"{altitude:>9.3f} | {peak_speed:>13.1f} | {reason}")
        if log.stage_separation_times:
            print(f"{'':14} | stage separations at t = {log.stage_separation_times}")
