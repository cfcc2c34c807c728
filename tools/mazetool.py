#!/usr/bin/env python3
import argparse, csv, json, os
from amazingmaze.log import setup_logging
from amazingmaze.mapgen.generator import generate_map

def write_tsv(mat, path):
    with open(path, 'w', newline='') as f:
        w = csv.writer(f, delimiter='\t')
        for r in mat:
            w.writerow(r)

def metadata(m):
    return {
        "seed": m.seed,
        "width": m.width,
        "height": m.height,
        "tile_size": m.tile_size,
        "splits": m.splits,
        "barrier_rows": {str(c): r for c, r in m.barrier_rows.items()},
        "gate_locations": [list(p) for p in m.gate_locations],
        "live_gates": [
            {"gate": g.gate.name, "input_a": g.input_a, "input_b": g.input_b, "upper": m.upper_is_live(i)}
            for i, g in enumerate(m.live_gates)
        ],
        "items": [list(p) for p in m.items],
    }

def cmd_emit(args):
    m = generate_map(args.seed, args.width, args.height, args.tile)
    os.makedirs(args.outdir, exist_ok=True)
    for name, mat in m.as_matrices().items():
        write_tsv(mat, os.path.join(args.outdir, f"{name}.tsv"))
    with open(os.path.join(args.outdir, "map.json"), 'w', encoding='utf-8') as f:
        json.dump(metadata(m), f, indent=2)
    print(f"Wrote layers to {args.outdir}")

def cmd_summary(args):
    m = generate_map(args.seed, args.width, args.height, args.tile)
    for i, col in enumerate(m.splits):
        upper, lower = m.circuits[i]
        side = "upper" if m.upper_is_live(i) else "lower"
        print(f"col {col:3d}  barrier {m.barrier_rows[col]:3d}  "
              f"upper {upper.gate.name}({upper.input_a:d},{upper.input_b:d})  "
              f"lower {lower.gate.name}({lower.input_a:d},{lower.input_b:d})  live {side}")
    print(f"{len(m.items)} items")

def main():
    p = argparse.ArgumentParser()
    p.add_argument('--log-level', default='WARNING')
    sub = p.add_subparsers(dest='cmd', required=True)
    for name, func in (('emit', cmd_emit), ('summary', cmd_summary)):
        sp = sub.add_parser(name)
        sp.add_argument('--seed', type=int, required=True)
        sp.add_argument('--width', type=int, default=20)
        sp.add_argument('--height', type=int, default=20)
        sp.add_argument('--tile', type=int, default=16)
        sp.set_defaults(func=func)
    sub.choices['emit'].add_argument('--outdir', type=str, required=True)
    args = p.parse_args()
    setup_logging(args.log_level)
    args.func(args)

if __name__ == '__main__':
    main()
