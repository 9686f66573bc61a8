"""
performance - Timing harness and simulated CPU classes

    cpu_profiles - Closed set of simulated CPUs (Basic, Mid, Pro), each a
                   scalar factor that measured time is divided by.

    benchmarks   - Trial loop around each algorithm: fresh input per trial,
                   perf_counter timing, CPU scaling, and a suite runner that
                   covers every configured algorithm and CPU profile.
"""
