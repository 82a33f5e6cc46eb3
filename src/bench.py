import time

from . import sweep


def run(n: int, repeat: int = 1) -> float:
    """指定回数だけ全 L 字形の探索を行い平均時間を返す簡易ベンチマーク関数"""
    total = 0.0
    for _ in range(repeat):
        start = time.perf_counter()
        sweep.run_sweep(n)
        total += time.perf_counter() - start
    avg = total / repeat if repeat else 0.0
    print(f"平均探索時間: {avg:.3f} 秒")
    return avg


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description="KnightL 探索ベンチマーク")
    parser.add_argument("n", type=int, help="盤面サイズ")
    parser.add_argument("-r", "--repeat", type=int, default=1, help="実行回数")
    args = parser.parse_args()
    run(args.n, args.repeat)
