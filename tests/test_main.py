import matplotlib
matplotlib.use("Agg")

import pandas as pd
from scipy.constants import g

from step_pipeline.main import main, process_recording

def write_recording(path, spikes=(100, 160)):
    n = 220
    z = [g] * n
    for i in spikes:
        z[i] = g + 40.0
    z[50] = float('nan')
    pd.DataFrame({
        'time_s': [i * 0.02 for i in range(n)],
        'x': [0.0] * n,
        'y': [0.0] * n,
        'z': z,
    }).to_csv(path, index=False)

def test_process_recording(tmp_path):
    path = tmp_path / 'walk.csv'
    write_recording(path)
    results = process_recording(str(path))

    assert len(results) == 219
    steps = [r.timestamp for r in results if r.step]
    assert steps == [2_000_000_000, 3_200_000_000]

def test_cli_prints_steps(tmp_path, capsys):
    path = tmp_path / 'walk.csv'
    write_recording(path)
    plot = tmp_path / 'walk.png'
    main(['process', '--input', str(path), '--plot', str(plot)])

    out = capsys.readouterr().out
    assert "Detected 2 steps:" in out
    assert "Step 1: t = 2.000 s" in out
    assert plot.exists()
