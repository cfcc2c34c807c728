#!/usr/bin/env python3
# Composite a generated map's layers into a PNG preview using Pillow.
# Tile images are looked up as "<id>.png" or "tile_<id>.png".

import argparse, os
from PIL import Image, ImageDraw, ImageFont
from amazingmaze.log import setup_logging
from amazingmaze.mapgen.generator import generate_map
from amazingmaze.render.tileset import ASSET_DIR, fallback_colour

def tile_image(tile_id, tile_size, asset_dir):
    candidates = [
        os.path.join(asset_dir, f"{tile_id}.png"),
        os.path.join(asset_dir, f"tile_{tile_id}.png"),
    ]
    for p in candidates:
        if os.path.exists(p):
            img = Image.open(p).convert("RGBA")
            if img.size != (tile_size, tile_size):
                img = img.resize((tile_size, tile_size), Image.NEAREST)
            return img
    # Fallback: category colour with the id on top
    img = Image.new("RGBA", (tile_size, tile_size), color=fallback_colour(tile_id))
    draw = ImageDraw.Draw(img)
    font = ImageFont.load_default()
    text = str(tile_id)
    tw, th = draw.textlength(text, font=font), 8
    draw.text(((tile_size - tw) / 2, (tile_size - th) / 2), text, fill=(0, 0, 0, 255), font=font)
    return img

def render_map(m, out_png, asset_dir=ASSET_DIR, tile_size=None):
    size = tile_size or m.tile_size
    canvas = Image.new("RGBA", (m.width * size, m.height * size), (0, 0, 0, 0))
    cache = {}
    # Layers stack in generation order; matrices are top row first.
    for mat in m.as_matrices().values():
        for y, row in enumerate(mat):
            for x, tid in enumerate(row):
                if tid < 0:
                    continue
                if tid not in cache:
                    cache[tid] = tile_image(tid, size, asset_dir)
                img = cache[tid]
                x0, y0 = x * size, y * size
                canvas.paste(img, (x0, y0, x0 + size, y0 + size), img)
    out_dir = os.path.dirname(out_png)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    canvas.save(out_png)

def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--seed", type=int, required=True)
    ap.add_argument("--width", type=int, default=20)
    ap.add_argument("--height", type=int, default=20)
    ap.add_argument("--tile", type=int, default=16, help="Tile size in pixels")
    ap.add_argument("--assets", type=str, default=ASSET_DIR, help="Directory containing tile PNGs")
    ap.add_argument("--out", type=str, required=True)
    args = ap.parse_args()
    setup_logging("INFO")

    m = generate_map(args.seed, args.width, args.height, args.tile)
    render_map(m, args.out, asset_dir=args.assets)
    print(f"Wrote {args.out}")

if __name__ == "__main__":
    main()
