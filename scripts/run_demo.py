import logging, sys, pathlib, threading, time
ROOT = pathlib.Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT / "src"))
from tracekit.bootstrap.main import build_sender_from_file
from tracekit.domain.spans import Span

def run_demo(config_path: str) -> None:
    sender = build_sender_from_file(config_path)
    now = time.time_ns()
    spans = [Span(operation_name=f"demo-{i}", trace_id=0xDEAD, span_id=i + 1, start_ns=now, end_ns=now + 1_000_000) for i in range(3)]
    sender.append(spans[0])
    sender.append(spans[1])
    t = threading.Thread(target=sender.append, args=(spans[2],), daemon=True)
    t.start()
    if hasattr(sender, "wait_for_blocked_appends") and sender.wait_for_blocked_appends(1, timeout=1.0):
        print(f"third append is blocked; flushed {sender.flush()} spans")
        sender.permit_append(1)
    t.join()
    print(f"received: {[s.operation_name for s in sender.get_received()]}" if hasattr(sender, "get_received") else "spans discarded")

if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)
    run_demo(config_path=str(ROOT / "configs" / "demo.yaml"))
